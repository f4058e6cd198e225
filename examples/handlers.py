def backup(args, options, parsed):
    target = args[0]
    mode = "dry run" if options.get("dry-run") else "live"
    print(f"Backing up {target} ({mode})")


async def restore(args, options, parsed):
    print(f"Restoring {args[0]} from {options.get('from', 'latest')}")
