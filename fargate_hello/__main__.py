from fargate_hello.cli import main

if __name__ == "__main__":
    main()
