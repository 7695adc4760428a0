from wasmpages.cli.deploy import main

if __name__ == "__main__":
    main()
