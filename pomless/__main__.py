from pomless.cli import main

main()
