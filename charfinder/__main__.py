from charfinder.cli import main

main()
