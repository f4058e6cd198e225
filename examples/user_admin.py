import asyncio
import logging

from cmdspec import ArgumentSpec, CommandSpec, OptionSpec, SingleArgumentSpec
from cmdspec.cli import main
from cmdspec.utils import setup_logging

setup_logging(console_log_level=logging.WARNING)

USERS = {"1": "ada", "2": "grace"}


def list_users(args, options, parsed):
    fmt = parsed.get_option("output", "text")
    for user_id, name in USERS.items():
        print(f"{user_id}: {name}" if fmt == "text" else {"id": user_id, "name": name})


async def edit_user(args, options, parsed):
    (user_id,) = args
    await asyncio.sleep(0.1)
    tags = options.get("tag", [])
    print(f"Edited {USERS.get(user_id, user_id)} with tags {tags}")


spec = CommandSpec(
    name="admin",
    description="🛠️ User administration demo",
    options=[
        OptionSpec(
            name="output",
            aliases=["-o", "--output"],
            description="Output format (text or json)",
            argument=SingleArgumentSpec(name="<format>"),
        ),
    ],
    subcommands=[
        CommandSpec(
            name="user",
            description="Manage users",
            subcommands=[
                CommandSpec(name="ls", description="List users", handler=list_users),
                CommandSpec(
                    name="edit",
                    description="Edit a user",
                    handler=edit_user,
                    arguments=[ArgumentSpec(name="<user_id>", description="User to edit")],
                    options=[
                        OptionSpec(
                            name="tag",
                            aliases=["-t", "--tag"],
                            description="Tag to add, repeatable",
                            multiple=True,
                            argument=SingleArgumentSpec(name="<tag>"),
                        )
                    ],
                ),
            ],
        )
    ],
)

if __name__ == "__main__":
    main(spec)
