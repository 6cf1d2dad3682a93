from dockmatch.cli import main

main()
