"""Print the Akahu OAuth authorization URL for the configured app."""
from akahu import AkahuClient, Settings


if __name__ == "__main__":
    settings = Settings()
    with AkahuClient.from_settings(settings) as client:
        print(client.auth.build_authorization_url())
