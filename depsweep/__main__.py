from depsweep.cli import main

main()
