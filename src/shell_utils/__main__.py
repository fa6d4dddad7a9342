from shell_utils.cli import main

main()
