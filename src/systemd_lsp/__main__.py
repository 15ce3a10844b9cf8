from systemd_lsp.cli import main

main()
