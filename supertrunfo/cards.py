"""Super Trunfo city cards, their attributes and console card entry."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Iterator, TextIO


def _divide(numerator: float, denominator: float) -> float:
    """Divide the way floating-point hardware does: no exception on zero."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


@dataclass(frozen=True)
class Card:
    """One city card of the game."""

    state: str
    code: str
    city: str
    population: int
    area: float
    gdp: float
    tourist_points: int

    def population_density(self) -> float:
        """Inhabitants per unit of area."""
        return _divide(self.population, self.area)

    def gdp_per_capita(self) -> float:
        """GDP divided by the number of inhabitants."""
        return _divide(self.gdp, self.population)

    def super_power(self) -> float:
        """Sum of all attributes, GDP per capita included, minus the density."""
        return (
            self.population
            + self.area
            + self.gdp
            + self.tourist_points
            + self.gdp_per_capita()
        ) - self.population_density()

    def attribute_sum(self) -> float:
        """Sum of population, area, GDP and tourist points, minus the density."""
        return (
            self.population + self.area + self.gdp + self.tourist_points
        ) - self.population_density()


class Attribute(IntEnum):
    """Comparable card attributes, numbered as in the game menu."""

    POPULATION = 1
    AREA = 2
    GDP = 3
    TOURIST_POINTS = 4
    POPULATION_DENSITY = 5

    def value_of(self, card: Card) -> float:
        """The value of this attribute on ``card``."""
        if self is Attribute.POPULATION:
            return card.population
        if self is Attribute.AREA:
            return card.area
        if self is Attribute.GDP:
            return card.gdp
        if self is Attribute.TOURIST_POINTS:
            return card.tourist_points
        return card.population_density()

    def beats(self, first: Card, second: Card) -> bool:
        """Whether ``first`` wins over ``second`` on this attribute.

        The lower population density wins; for every other attribute the
        higher value wins.
        """
        mine, theirs = self.value_of(first), self.value_of(second)
        if self is Attribute.POPULATION_DENSITY:
            return mine < theirs
        return mine > theirs


class Outcome(Enum):
    """Result of a comparison between two cards."""

    FIRST = "first"
    SECOND = "second"
    TIE = "tie"


def token_stream(lines: Iterable[str]) -> Iterator[str]:
    """Yield whitespace-separated tokens from ``lines``."""
    for line in lines:
        yield from line.split()


_PROMPTS = (
    "Insira o Estado da sua carta (Informe uma letra entre A e H): \n",
    "Insira o Codigo da sua carta de contendo a letra do Estado + um numero entre 01 e 04: \n",
    "Insira o Nome da Cidade: \n",
    "Insira o Numero de Habitantes: \n",
    "Insira a area da cidade: \n",
    "Insira o PIB da cidade: \n",
    "Insira a quantidade de Pontos Turisticos da cidade: \n",
)


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("input ended before the card was complete") from None


def read_card(tokens: Iterable[str], out: TextIO) -> Card:
    """Prompt on ``out`` for each field and build a card from ``tokens``.

    Raises EOFError when the tokens run out and ValueError when a number
    cannot be read.
    """
    stream = iter(tokens)
    answers = []
    for prompt in _PROMPTS:
        out.write(prompt)
        answers.append(_next_token(stream))
    state, code, city, population, area, gdp, tourist_points = answers
    return Card(
        state=state,
        code=code,
        city=city,
        population=int(population),
        area=float(area),
        gdp=float(gdp),
        tourist_points=int(tourist_points),
    )