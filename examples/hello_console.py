import helloguid


def main() -> None:
    # Start (or attach to) a server on a fixed port so repeated runs share one registry.
    target = helloguid.run(port=57794, open_browser=False)
    client = target.as_client() if isinstance(target, helloguid.HelloServer) else target

    app = helloguid.Application(helloguid.ConsoleIO(), client)
    try:
        app.run()
    except helloguid.RegistryError as ex:
        print(f"Sorry, something went wrong: {ex}")


if __name__ == "__main__":
    main()
