from a11yflash.cli import main

main()
