from lumen.server import app

if __name__ == "__main__":
    host, port = app.config["HOST"], app.config["PORT"]
    print(f"Lumen local app, open http://{host}:{port}")
    app.run(host=host, port=port, debug=app.config["DEBUG"])
