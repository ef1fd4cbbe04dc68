"""
Grant (or revoke) the admin role for a user of the external auth service.

The application never writes user_roles itself; this is the out-of-band
provisioning path.

Usage:
    python -m scripts.grant_admin <user_id>
    python -m scripts.grant_admin <user_id> --revoke
"""
import argparse
import asyncio
import logging

from animestream.crud.user_role import grant_role, revoke_role
from animestream.database import AsyncSessionLocal
from animestream.models.user_role import ADMIN_ROLE

logger = logging.getLogger("animestream.scripts.grant_admin")


async def run(user_id: str, *, revoke: bool = False) -> bool:
    async with AsyncSessionLocal() as session:
        if revoke:
            changed = await revoke_role(session, user_id, ADMIN_ROLE)
            logger.info("revoke admin user_id=%s changed=%s", user_id, changed)
        else:
            changed = await grant_role(session, user_id, ADMIN_ROLE)
            logger.info("grant admin user_id=%s changed=%s", user_id, changed)
    return changed


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("user_id", help="user id issued by the auth service")
    parser.add_argument("--revoke", action="store_true", help="remove the admin role instead")
    args = parser.parse_args(argv)

    user_id = args.user_id.strip()
    if not user_id:
        parser.error("user_id must not be empty")

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    changed = asyncio.run(run(user_id, revoke=args.revoke))
    if args.revoke:
        print("Admin role revoked" if changed else "User had no admin role")
    else:
        print("Admin role granted" if changed else "User is already an admin")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
