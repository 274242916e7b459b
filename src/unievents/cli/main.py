"""UniEvents CLI — seed accounts and run the API server.

Usage:
    unievents create-user --email a@uni.edu --password s3cret \\
        --username alice --first-name Alice --last-name Smith --role coordinator
    unievents serve --reload
"""

from __future__ import annotations

import asyncio
import sys
from typing import Optional

import click
from sqlalchemy import func, select

from unievents.auth.password import hash_password
from unievents.config import settings
from unievents.db.engine import build_engine, build_session_factory
from unievents.db.models import ROLES, User


async def _create_user(database_url: str, fields: dict, password: str) -> Optional[str]:
    """Insert a user; returns its id, or None if the email is taken."""
    engine = build_engine(database_url)
    session_factory = build_session_factory(engine)
    try:
        async with session_factory() as db:
            q = select(User).where(func.lower(User.email) == fields["email"])
            if (await db.execute(q)).scalars().first():
                return None
            password_hash = await asyncio.to_thread(hash_password, password)
            user = User(password_hash=password_hash, **fields)
            db.add(user)
            await db.commit()
            return user.id
    finally:
        await engine.dispose()


@click.group()
def cli():
    """UniEvents — university event management."""


@cli.command("create-user")
@click.option("--email", required=True, help="Login email (stored lower-cased).")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Password; prompted for if omitted.",
)
@click.option("--username", required=True)
@click.option("--first-name", required=True)
@click.option("--last-name", required=True)
@click.option("--role", type=click.Choice(ROLES), default="student", show_default=True)
@click.option("--department")
@click.option("--student-id")
@click.option("--faculty-id")
@click.option("--course")
@click.option("--branch")
@click.option(
    "--database-url",
    default=lambda: settings.database_url,
    help="Defaults to UNIEVENTS_DATABASE_URL.",
)
def create_user(
    email,
    password,
    username,
    first_name,
    last_name,
    role,
    department,
    student_id,
    faculty_id,
    course,
    branch,
    database_url,
):
    """Create a stored user account with a bcrypt password hash."""
    fields = {
        "email": email.strip().lower(),
        "username": username,
        "first_name": first_name,
        "last_name": last_name,
        "role": role,
        "department": department,
        "student_id": student_id,
        "faculty_id": faculty_id,
        "course": course,
        "branch": branch,
    }
    user_id = asyncio.run(_create_user(database_url, fields, password))
    if user_id is None:
        click.secho(f"Error: {fields['email']} is already registered", fg="red", err=True)
        sys.exit(1)
    click.secho(f"Created {role} {fields['email']} ({user_id})", fg="green")


@cli.command()
@click.option("--host", default=lambda: settings.host, show_default="settings.host")
@click.option("--port", type=int, default=lambda: settings.port, show_default="settings.port")
@click.option("--reload", is_flag=True, help="Auto-reload on code changes.")
def serve(host, port, reload):
    """Run the API server with uvicorn."""
    import uvicorn

    uvicorn.run("unievents.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    cli()
