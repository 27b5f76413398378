from host.app import main

main()
