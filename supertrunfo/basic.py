"""The basic game: enter two cards and compare their populations."""

from __future__ import annotations

import sys
from typing import Iterable, TextIO

from supertrunfo.cards import Attribute, Outcome, read_card, token_stream


def play(tokens: Iterable[str], out: TextIO) -> Outcome:
    """Read two cards from ``tokens`` and report which has more inhabitants.

    A tie is reported as a win for the second card.
    """
    stream = iter(tokens)
    out.write("Vamos comecar cadastrando as nossas cartas de SUPER TRUNFO!\n")
    out.write("Insira os dados da primeira carta: \n")
    first = read_card(stream, out)
    out.write("\nInsira os dados da segunda carta: \n\n")
    second = read_card(stream, out)

    out.write(" ****  Comparacao de Cartas (Atributo: Habitantes ) ****\n")
    out.write(f"Carta 1: {first.city} : {first.population} \n")
    out.write(f"Carta 2: {second.city} : {second.population} \n")
    if Attribute.POPULATION.beats(first, second):
        out.write(f"Carta 1 ({first.city}) venceu!\n")
        return Outcome.FIRST
    out.write(f"Carta 2 ({second.city}) venceu!\n")
    return Outcome.SECOND


def main(argv: list[str] | None = None) -> int:
    """Play the basic game on standard input and output."""
    try:
        play(token_stream(sys.stdin), sys.stdout)
    except (EOFError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())