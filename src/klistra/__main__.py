from klistra.main import main

main()
