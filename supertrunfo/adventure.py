"""The adventure game: enter two cards and compare them on a chosen attribute."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, TextIO

from supertrunfo.cards import Attribute, Card, Outcome, read_card, token_stream

_MENU = (
    "\n ****  Comparacao de Cartas ****\n"
    "\n Selecione qual item voce gostaria de comparar informando de 1 a 5:  \n"
    " Populacao: 1\n"
    " Area: 2\n"
    " PIB: 3\n"
    " Numero de Pontos Turisticos: 4\n"
    " Densidade Demografica: 5\n"
)

_LINES = {
    Attribute.POPULATION: " Carta {n}: {city}  ||  Habitantes  ||  Numero de Habitante: {value} \n",
    Attribute.AREA: " Carta {n}: {city}  ||  Area  ||  Area do Pais: {value:.2f} \n",
    Attribute.GDP: " Carta {n}: {city}  ||  PIB  ||  PIB do Pais: {value:.2f} \n",
    Attribute.TOURIST_POINTS: (
        " Carta {n}: {city}  ||  Pontos Turisticos  ||  "
        "Numero de Pontos Turisticos: {value} \n"
    ),
    Attribute.POPULATION_DENSITY: (
        " Carta {n}: {city}  ||  Densidade Demografica  ||   "
        "Densidade Demografica: {value:.2f} \n"
    ),
}


def compare(first: Card, second: Card, attribute: Attribute) -> Outcome:
    """Decide which card wins on ``attribute``.

    The lower population density wins; otherwise the higher value wins.
    For tourist points, the second card only wins when the first card's
    tourist points are below the second card's population.
    """
    if attribute is Attribute.POPULATION_DENSITY:
        mine, theirs = first.population_density(), second.population_density()
        if mine < theirs:
            return Outcome.FIRST
        if mine > theirs:
            return Outcome.SECOND
        return Outcome.TIE

    mine, theirs = attribute.value_of(first), attribute.value_of(second)
    if mine > theirs:
        return Outcome.FIRST
    # The game checks tourist points against the rival's population here.
    rival = second.population if attribute is Attribute.TOURIST_POINTS else theirs
    if mine < rival:
        return Outcome.SECOND
    return Outcome.TIE


def _read_option(tokens: Iterator[str]) -> Attribute | None:
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError("input ended before an option was chosen") from None
    number = int(token)
    try:
        return Attribute(number)
    except ValueError:
        return None


def play(tokens: Iterable[str], out: TextIO) -> Outcome | None:
    """Read two cards and a menu option from ``tokens`` and report the winner.

    Returns None when the option is not one of the menu entries.
    """
    stream = iter(tokens)
    out.write("Vamos comecar cadastrando as nossas cartas de SUPER TRUNFO!\n")
    out.write("Insira os dados da primeira carta: \n")
    first = read_card(stream, out)
    out.write("\nInsira os dados da segunda carta: \n\n")
    second = read_card(stream, out)

    out.write(_MENU)
    attribute = _read_option(stream)
    if attribute is None:
        out.write("Opcao Invalida")
        return None

    line = _LINES[attribute]
    for number, card in ((1, first), (2, second)):
        out.write(line.format(n=number, city=card.city, value=attribute.value_of(card)))

    outcome = compare(first, second, attribute)
    if outcome is Outcome.FIRST:
        out.write(" A Carta 1 Venceu!")
    elif outcome is Outcome.SECOND:
        out.write(" A Carta 2 Venceu!")
    else:
        out.write("Houve um empate!\n")
    return outcome


def main(argv: list[str] | None = None) -> int:
    """Play the adventure game on standard input and output."""
    try:
        play(token_stream(sys.stdin), sys.stdout)
    except (EOFError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())