import argparse
import asyncio
from core.auth_utils import create_access_token
from core.database import init_db, get_or_create_user
from core.logging_config import get_logger

logger = get_logger(__name__)

# Create a user for local testing and print a bearer token for it
async def seed_user(email: str, name: str = None):
    await init_db()
    user_uuid = await get_or_create_user(email, name)
    token = create_access_token({"email": email, "user_uuid": str(user_uuid)})
    logger.info(f"Seeded user {email} ({user_uuid})")
    return token

def main(argv=None):
    parser = argparse.ArgumentParser(description="Seed a user and print a bearer token.")
    parser.add_argument("email")
    parser.add_argument("--name", default=None)
    args = parser.parse_args(argv)

    token = asyncio.run(seed_user(args.email, args.name))
    print(f"Authorization: Bearer {token}")

if __name__ == "__main__":
    main()
