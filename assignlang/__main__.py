from assignlang.main import main

main()
