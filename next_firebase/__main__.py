from next_firebase.cli import main

main()
