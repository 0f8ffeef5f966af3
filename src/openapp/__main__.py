from openapp import main

main()
