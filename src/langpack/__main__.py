from langpack.cli import main

main()
