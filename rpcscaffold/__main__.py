from rpcscaffold.generator import main

main()
