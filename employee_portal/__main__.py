from employee_portal.main import main

main()
