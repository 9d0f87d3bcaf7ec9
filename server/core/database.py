import asyncpg
from fastapi import HTTPException
from core.config import DATABASE_URL
from core.logging_config import get_logger

logger = get_logger(__name__)

DB_UNAVAILABLE = "No Connection to Database"

async def get_db_connection():
    return await asyncpg.connect(DATABASE_URL)

def _unavailable(operation: str, e: Exception):
    logger.error(f"Database error in {operation}: {e}")
    return HTTPException(status_code=500, detail=DB_UNAVAILABLE)

async def init_db():
    conn = await get_db_connection()
    try:
        # Make users table
        await conn.execute("""
            CREATE TABLE IF NOT EXISTS users (
                user_uuid UUID PRIMARY KEY DEFAULT gen_random_uuid(),
                email TEXT UNIQUE NOT NULL,
                name TEXT,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            );
        """)
        # Make rooms table, one room per host
        await conn.execute("""
            CREATE TABLE IF NOT EXISTS rooms (
                room_id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
                host_uuid UUID UNIQUE NOT NULL REFERENCES users(user_uuid) ON DELETE CASCADE,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            );
        """)
        # users.room_id is added after rooms exists (the two tables reference each other)
        await conn.execute("""
            ALTER TABLE users
            ADD COLUMN IF NOT EXISTS room_id UUID REFERENCES rooms(room_id) ON DELETE SET NULL;
        """)
        logger.info("Database schema ready")
    finally:
        await conn.close()

async def get_user_by_email(email: str):
    try:
        conn = await get_db_connection()
    except Exception as e:
        raise _unavailable("get_user_by_email", e) from e
    try:
        user = await conn.fetchrow("""
            SELECT user_uuid, email, name, room_id FROM users WHERE email = $1
        """, email)
        return dict(user) if user else None
    except Exception as e:
        raise _unavailable("get_user_by_email", e) from e
    finally:
        await conn.close()

async def get_user_with_room(email: str):
    """
    Find a user and resolve the room they belong to.

    room_id is None when the user has no room or the stored reference
    points at a room that no longer exists.
    """
    try:
        conn = await get_db_connection()
    except Exception as e:
        raise _unavailable("get_user_with_room", e) from e
    try:
        row = await conn.fetchrow("""
            SELECT u.user_uuid, r.room_id
            FROM users u
            LEFT JOIN rooms r ON r.room_id = u.room_id
            WHERE u.email = $1
        """, email)
        return dict(row) if row else None
    except Exception as e:
        raise _unavailable("get_user_with_room", e) from e
    finally:
        await conn.close()

async def is_hosting(user_uuid) -> bool:
    try:
        conn = await get_db_connection()
    except Exception as e:
        raise _unavailable("is_hosting", e) from e
    try:
        return await conn.fetchval("""
            SELECT EXISTS (SELECT 1 FROM rooms WHERE host_uuid = $1)
        """, user_uuid)
    except Exception as e:
        raise _unavailable("is_hosting", e) from e
    finally:
        await conn.close()

async def create_room_for_host(user_uuid):
    """Create a room hosted by the user and move the user into it.

    Returns the new room id as a string, or None if the user already hosts a room.
    """
    try:
        conn = await get_db_connection()
    except Exception as e:
        raise _unavailable("create_room_for_host", e) from e
    try:
        async with conn.transaction():
            room_id = await conn.fetchval("""
                INSERT INTO rooms (host_uuid) VALUES ($1)
                RETURNING room_id
            """, user_uuid)
            await conn.execute("""
                UPDATE users SET room_id = $1, updated_at = CURRENT_TIMESTAMP
                WHERE user_uuid = $2
            """, room_id, user_uuid)
        logger.info(f"Room {room_id} created for host {user_uuid}")
        return str(room_id)
    except asyncpg.UniqueViolationError:
        logger.info(f"User {user_uuid} is already hosting a room")
        return None
    except Exception as e:
        raise _unavailable("create_room_for_host", e) from e
    finally:
        await conn.close()

async def get_or_create_user(email: str, name: str = None):
    try:
        conn = await get_db_connection()
    except Exception as e:
        raise _unavailable("get_or_create_user", e) from e
    try:
        user_uuid = await conn.fetchval("""
            SELECT user_uuid FROM users WHERE email = $1
        """, email)
        if user_uuid is None:
            user_uuid = await conn.fetchval("""
                INSERT INTO users (email, name) VALUES ($1, $2)
                RETURNING user_uuid
            """, email, name)
            logger.info(f"Created user {user_uuid} for {email}")
        return user_uuid
    except Exception as e:
        raise _unavailable("get_or_create_user", e) from e
    finally:
        await conn.close()
