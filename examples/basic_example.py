# examples/basic_example.py
"""
Basic example of using the featuredemo helpers directly
"""

from featuredemo import (
    Area,
    User,
    build_request,
    compact_map_values,
    fetch_result,
    is_multiple,
    parse_int,
    raw,
    read_resource,
    try_messages,
)


def main():
    print("Parsed timings:", compact_map_values({"bus": "35", "ferry": "n/a"}, parse_int))
    print("Multiples of 3 below 10:", [n for n in range(10) if is_multiple(n, 3)])
    print(raw(r'#"Path: C:\Users\\#(name)"#', name="demo"))
    print(f"{Area(code=3, name='Osaki')}")

    for user_id in (5, -5):
        print(f"User {user_id}:", try_messages(User.create(user_id)))

    print("Fetch:", fetch_result(build_request("https://example.com/items")))

    for ext in ("txt", "pdf"):
        result = read_resource("test", ext)
        print(f"test.{ext}:", "ok" if result.is_success else type(result.error).__name__)


if __name__ == "__main__":
    main()
