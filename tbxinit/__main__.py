from tbxinit.cli import main

main()
