#!/usr/bin/env python
"""Create or update the administrator account and its employee record."""

import asyncio
import logging
import sys
from datetime import date
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hrms_api.database import async_session_maker, engine
from hrms_api.logging_config import setup_logging
from hrms_api.models.domain.employee import EmployeeStatus
from hrms_api.models.domain.user import UserRole
from hrms_api.repositories.employee_repository import EmployeeRepository
from hrms_api.repositories.user_repository import UserRepository
from hrms_api.security.password import get_password_service

logger = logging.getLogger("seed_admin")

MIN_ADMIN_PASSWORD_LENGTH = 12


async def seed_admin(email: str, password: str, name: str) -> bool:
    """Upsert an ADMIN account linked to a System Administrator employee."""
    if len(password) < MIN_ADMIN_PASSWORD_LENGTH:
        logger.error("Password must be at least %d characters", MIN_ADMIN_PASSWORD_LENGTH)
        return False

    email = email.lower()
    first_name, _, last_name = name.partition(" ")
    password_hash = get_password_service().hash_password(password)

    async with async_session_maker() as session:
        user_repo = UserRepository(session)
        employee_repo = EmployeeRepository(session)

        user = await user_repo.get_by_email(email)
        if user is None:
            user = await user_repo.create(
                name=name,
                email=email,
                password_hash=password_hash,
                role=UserRole.ADMIN.value,
            )
        else:
            user = await user_repo.update(
                user, name=name, password_hash=password_hash, role=UserRole.ADMIN.value
            )

        employee_fields = {
            "first_name": first_name,
            "last_name": last_name or first_name,
            "job_title": "System Administrator",
            "department": "IT",
            "status": EmployeeStatus.ACTIVE.value,
            "created_by": user.id,
        }
        employee = await employee_repo.get_by_email(email)
        if employee is None:
            employee = await employee_repo.create(
                email=email, joining_date=date.today(), **employee_fields
            )
        else:
            employee = await employee_repo.update(employee, **employee_fields)

        if user.employee_id != employee.id:
            await user_repo.update(user, employee_id=employee.id)

        await session.commit()

    await engine.dispose()
    logger.info("Admin user %s linked to employee %s (System Administrator, IT)", email, employee.id)
    return True


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Create or update the administrator account")
    parser.add_argument("--email", required=True, help="Email address")
    parser.add_argument("--password", required=True, help="Password (min 12 chars)")
    parser.add_argument("--name", default="Admin User", help="Display name")
    args = parser.parse_args()

    setup_logging()
    ok = asyncio.run(seed_admin(args.email, args.password, args.name))
    sys.exit(0 if ok else 1)
