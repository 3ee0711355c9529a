from relaybot.app import main

main()
