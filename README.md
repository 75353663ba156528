# supertrunfo

Super Trunfo is a card game for the terminal. Each card is a city. Two cards are compared on one of their attributes, and the stronger card wins the round.

## Installation

```
pip install .
```

## Playing

There are three ways to play. Each one has its own command. The prompts and messages are in Portuguese.

### Basic game

```
supertrunfo
```

You enter two cards. For each card the game asks for:

- the state letter
- the card code
- the city name
- the population
- the area
- the GDP
- the number of tourist attractions

The two cards are then compared on population. The card with more inhabitants wins. If the populations are equal, the second card is named the winner.

### Adventurer level

```
supertrunfo-aventureiro
```

You enter two cards in the same way as in the basic game. Then you pick one attribute to compare:

1. Population
2. Area
3. GDP
4. Number of tourist attractions
5. Population density

Both cards' values are shown, and then the result.

- Population density: the lower value wins.
- Every other attribute: the higher value wins. If the values are equal, the round is a draw.
- Tourist attractions: the first card wins when it has more attractions. The second card wins only when the first card's attractions are fewer than the second card's *population*. In every other case the round is a draw.

Any number outside 1 to 5 prints `Opcao Invalida` and ends the game.

### Master level

```
supertrunfo-mestre
```

This level uses two built-in cards, `Sao Paulo` and `Rio de Janeiro`. You pick two attributes from the same menu. The game prints:

- the values of both cards for each chosen attribute;
- each card's attribute sum, which is population + area + GDP + tourist attractions − population density.

Then it decides the round:

- If the first card wins on both attributes, card 1 wins.
- If the first card loses on both attributes, card 2 wins.
- If the results are split, the round is a draw (`Empatou!`).

A card only "wins" an attribute when its value is strictly better. For population density, better means lower.

If you pick the same number twice, the game asks you to pick a different one. It does not prompt again: the second attribute counts as not chosen.

### Input and errors

Answers are read as tokens separated by whitespace. A city name therefore has to be a single word, for example `Curitiba`. Because input is read this way, you can pipe a whole game into a command:

```
printf 'A A01 Curitiba 1000 50 300 5 B B02 Recife 800 40 200 3 1\n' | supertrunfo-aventureiro
```

The command prints `error: ...` on standard error and exits with status 1 in two cases:

- the input ends before the game is complete;
- a number cannot be read.

## Using the library

Each mode has a `play` function. It reads answers from an iterable of tokens, writes its output to a text stream, and returns an `Outcome`:

- `supertrunfo.basic.play(tokens, out)`
- `supertrunfo.adventure.play(tokens, out)` returns `None` for an invalid menu option.
- `supertrunfo.master.play(first, second, tokens, out)` returns `None` when no result can be decided.

The `supertrunfo.cards` module holds the pieces the modes share:

- `Card`: a frozen dataclass with `state`, `code`, `city`, `population`, `area`, `gdp` and `tourist_points`. It also gives the derived values `population_density()`, `gdp_per_capita()`, `super_power()` and `attribute_sum()`.
- `Attribute`: the five menu entries, numbered 1 to 5, with `value_of(card)` and `beats(first, second)`.
- `Outcome`: one of `FIRST`, `SECOND` or `TIE`.
- `token_stream(lines)`: splits lines into tokens.
- `read_card(tokens, out)`: prompts for the seven fields and builds a `Card`.

Two more functions are available:

- `supertrunfo.adventure.compare(first, second, attribute)` gives the adventurer-level `Outcome` for one attribute.
- `supertrunfo.master.default_cards()` returns the two built-in cards.

Example:

```python
import io
from supertrunfo.adventure import play

tokens = "A A01 Curitiba 1000 50 300 5 B B02 Recife 800 40 200 3 1".split()
out = io.StringIO()
print(play(tokens, out))  # Outcome.FIRST
```

## Limitations

- Each game is a single round. No score is kept between rounds.
- Cards are not checked against the state letters or code ranges mentioned in the prompts.
- Cards are not saved anywhere.

## Tests

```
pip install .[test]
pytest
```