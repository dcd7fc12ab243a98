from aeroweight.bootstrap.entrypoints import main

main()
