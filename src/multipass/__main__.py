from multipass._cli import main

main()
