from proxy_scanner.cli import main

main()
