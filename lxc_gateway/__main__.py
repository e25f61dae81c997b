from lxc_gateway.app import main

main()
