"""
Basic options: construction, combinators, and in-place mutation.

Run: python examples/basic_option.py
"""
from optionpy import Some, Nothing, from_nullable, flatten, unzip, configure


def find_user(users, name):
    return from_nullable(users.get(name))


def main():
    users = {"ada": {"age": 36}, "bob": {"age": None}}

    # Compose lookups without None checks
    age = find_user(users, "ada").and_then(lambda u: from_nullable(u["age"]))
    print("ada age:", age.map_or("unknown", str))
    print("bob age:", find_user(users, "bob").and_then(lambda u: from_nullable(u["age"])).unwrap_or(-1))
    print("eve:", find_user(users, "eve"))

    # Pairing and splitting
    pair = Some(1).zip(Some("one"))
    n, word = unzip(pair)
    print("zipped:", pair, "unzipped:", n, word)
    print("flatten:", flatten(Some(Some(3))))

    # Mutating handle; turn on debug logs to see the state transitions
    configure(log_level="DEBUG")
    slot = Nothing()
    slot.get_or_insert_with(lambda: "cached")
    print("slot after insert:", slot)
    print("taken:", slot.take(), "slot now:", slot)


if __name__ == "__main__":
    main()
