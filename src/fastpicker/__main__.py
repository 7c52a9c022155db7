from fastpicker.cli import main

main()
