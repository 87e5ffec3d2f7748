from checkie.app import main

main()
