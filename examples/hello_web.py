import time

import helloguid


def main() -> None:
    target = helloguid.run(port=57794)
    url = target.url if isinstance(target, helloguid.HelloServer) else target.base_url
    print(f"Open {url} and enter your name.")

    try:
        while True:
            time.sleep(3600)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
