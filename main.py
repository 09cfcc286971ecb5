from battlesnake import create_battlesnake_server

# Create Flask app (WSGI hosts load it as main:app)
app = create_battlesnake_server()

if __name__ == "__main__":
    from run import main
    main()
