from qpe.table.cli import main

main()
