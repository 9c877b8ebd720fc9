from app import SceneLoaderApp
import config, web_remote

def main():
    app = SceneLoaderApp()
    if getattr(config, "WEB_REMOTE", False):
        web_remote.start(app)
    app.run()

if __name__ == "__main__":
    main()
