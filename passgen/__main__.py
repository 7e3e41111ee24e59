from passgen.cli import main

main()
