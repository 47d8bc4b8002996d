from kex.cli import main

main()
