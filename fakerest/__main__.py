from fakerest.cli import main

main()
