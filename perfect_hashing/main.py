"""
Проверка принадлежности через stdin.
    python main.py < input.txt
Формат: n, затем n чисел, затем q, затем q запросов. Ответ — Yes/No на строку.
"""

import argparse
import logging
import sys

from construction import BadHashFunction, MAX_ATTEMPTS
from fixed_set import FixedSet, FixedSetConfig


def read_ints(stream):
    for line in stream:
        for token in line.split():
            yield int(token)


def run(stream, out, config: FixedSetConfig) -> None:
    tokens = read_ints(stream)
    n = next(tokens)
    numbers = [next(tokens) for _ in range(n)]
    fs = FixedSet(config)
    fs.initialize(numbers)

    q = next(tokens)
    for _ in range(q):
        out.write("Yes\n" if next(tokens) in fs else "No\n")


def main(argv=None):
    p = argparse.ArgumentParser(description="FKS fixed set membership queries")
    p.add_argument("--seed",         type=int, default=None,         help="Seed генератора хешей")
    p.add_argument("--max-attempts", type=int, default=MAX_ATTEMPTS, help="Попыток на поиск хеша")
    p.add_argument("--log-level",    default="WARNING",              help="Уровень логирования")
    args = p.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper()),
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    if args.max_attempts <= 0:
        p.error("--max-attempts must be positive")

    try:
        run(sys.stdin, sys.stdout, FixedSetConfig(args.max_attempts, args.seed))
    except BadHashFunction as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except StopIteration:
        print("error: unexpected end of input", file=sys.stderr)
        return 1
    except (ValueError, TypeError) as e:
        print(f"error: malformed input: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
