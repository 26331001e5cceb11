from jsonprettifier.cli import main

main()
