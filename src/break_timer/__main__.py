from break_timer.main import main

main()
