"""The master game: compare two preset cards on two different attributes."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, TextIO

from supertrunfo.cards import Attribute, Card, Outcome, token_stream

_OPTIONS = (
    " Populacao: 1\n"
    " Area: 2\n"
    " PIB: 3\n"
    " Numero de Pontos Turisticos: 4\n"
    " Densidade Demografica: 5\n"
)

_NAMES = {
    Attribute.POPULATION: "Populacao",
    Attribute.AREA: "Area",
    Attribute.GDP: "PIB",
    Attribute.TOURIST_POINTS: "Ponto Turistico",
    Attribute.POPULATION_DENSITY: "Densidade Populacional",
}

_FIRST_VALUES = {
    Attribute.POPULATION: "Populacao com valor 1: {0} e Valor 2: {1} e",
    Attribute.AREA: "Area em Km2com valor 1: {0:.2f} e Valor 2: {1:.2f} e",
    Attribute.GDP: "Pib com valor 1: {0:.2f}  e Valor 2: {1:.2f} e",
    Attribute.TOURIST_POINTS: "Ponto Turistico com valor 1: {0} e Valor 2 : {1} e",
    Attribute.POPULATION_DENSITY: (
        "Densidade Populacional com valor 1: {0:.2f}  e Valor 2 : {1:.2f} e"
    ),
}

_SECOND_VALUES = {
    Attribute.POPULATION: " Populacao com valor 1: {0} e Valor 2 : {1} \n",
    Attribute.AREA: " Area em Km2 com valor 1: {0:.2f}  e Valor 2 : {1:.2f} \n",
    Attribute.GDP: " Pib com valor 1: {0:.2f}  e Valor 2 : {1:.2f} \n",
    Attribute.TOURIST_POINTS: " Ponto Turistico com valor 1: {0} , e Valor 2 : {1}",
    Attribute.POPULATION_DENSITY: (
        " Densidade Populacional com valor 1: {0:.2f}  e Valor 2 : {1:.2f} "
    ),
}


def default_cards() -> tuple[Card, Card]:
    """The two preset cards the master game is played with."""
    first = Card(
        state="",
        code="",
        city="Sao Paulo",
        population=10000,
        area=250.0,
        gdp=396.78,
        tourist_points=10,
    )
    second = Card(
        state="",
        code="",
        city="Rio de Janeiro",
        population=10000,
        area=49.0,
        gdp=250.83,
        tourist_points=15,
    )
    return first, second


def _read_option(tokens: Iterator[str]) -> tuple[int, Attribute | None]:
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError("input ended before an option was chosen") from None
    number = int(token)
    try:
        return number, Attribute(number)
    except ValueError:
        return number, None


def _choose(
    first: Card, second: Card, attribute: Attribute | None, order: int, out: TextIO
) -> bool | None:
    if attribute is None:
        out.write("Opcao Invalida")
        return None
    out.write(f"Voce escolheu como opcao {order} - {_NAMES[attribute]}\n")
    return attribute.beats(first, second)


def play(
    first: Card, second: Card, tokens: Iterable[str], out: TextIO
) -> Outcome | None:
    """Compare the cards on two attributes read from ``tokens``.

    The first card wins when it wins both attributes, the second when it
    wins both, and a split is a tie. Returns None when no result can be
    decided because neither attribute was validly chosen.
    """
    stream = iter(tokens)
    out.write("\n ****  Comparacao de Cartas ****\n")
    out.write("\n Selecione qual item voce gostaria de comparar informando de 1 a 5:  \n")
    out.write(_OPTIONS)
    number, attribute = _read_option(stream)
    result1 = _choose(first, second, attribute, 1, out)

    out.write(
        "\n Selecione agora o segundo item que voce gostaria de comparar "
        "informando de 1 a 5:  \n"
    )
    out.write(_OPTIONS)
    number2, attribute2 = _read_option(stream)

    result2: bool | None = None
    if number == number2:
        out.write("VOCE SELECIONOU O MESMO ITEM, FAVOR SELECIONAR UM DIFERENTE\n")
    else:
        result2 = _choose(first, second, attribute2, 2, out)

    out.write(f"\nCidade 1 {first.city} e Cidade 2 {second.city}\n")
    out.write("Atributos selecionado: \n")
    if attribute is not None:
        out.write(
            _FIRST_VALUES[attribute].format(
                attribute.value_of(first), attribute.value_of(second)
            )
        )
    if attribute2 is not None:
        out.write(
            _SECOND_VALUES[attribute2].format(
                attribute2.value_of(first), attribute2.value_of(second)
            )
        )

    out.write(f"\nSoma dos atributos da carta 1: {first.attribute_sum():.2f} \n")
    out.write(f"Soma dos atributos da carta 2: {second.attribute_sum():.2f} \n")

    if result1 != result2:
        out.write("Empatou!")
        return Outcome.TIE
    if result1 is True:
        out.write("Carta 1 venceu \n")
        return Outcome.FIRST
    if result1 is False:
        out.write("Carta 2 venceu \n")
        return Outcome.SECOND
    return None


def main(argv: list[str] | None = None) -> int:
    """Play the master game on standard input and output."""
    first, second = default_cards()
    try:
        play(first, second, token_stream(sys.stdin), sys.stdout)
    except (EOFError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())