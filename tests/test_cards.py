import io
import math

import pytest

from supertrunfo.cards import Attribute, Card, read_card, token_stream


def make(city="Alpha", population=1000, area=10.0, gdp=500.0, tourist_points=3):
    return Card("A", "A01", city, population, area, gdp, tourist_points)


def test_density_times_area_gives_population():
    card = make(population=12345, area=67.5)
    assert card.population_density() * card.area == pytest.approx(card.population)


def test_gdp_per_capita_times_population_gives_gdp():
    card = make(population=250, gdp=396.78)
    assert card.gdp_per_capita() * card.population == pytest.approx(card.gdp)


def test_super_power_exceeds_attribute_sum_by_gdp_per_capita():
    card = make(population=4000, area=33.0, gdp=812.5, tourist_points=7)
    assert card.super_power() - card.attribute_sum() == pytest.approx(
        card.gdp_per_capita()
    )


def test_attribute_sum_adds_attributes_minus_density():
    card = make(population=100, area=100.0, gdp=0.0, tourist_points=0)
    assert card.attribute_sum() == pytest.approx(200.0 - card.population_density())


def test_zero_area_gives_infinite_density():
    card = make(area=0.0)
    assert card.population_density() == math.inf


def test_zero_population_and_gdp_gives_nan_per_capita():
    card = make(population=0, gdp=0.0)
    assert str(card.gdp_per_capita()) == "nan"


@pytest.mark.parametrize(
    "attribute, field",
    [
        (Attribute.POPULATION, "population"),
        (Attribute.AREA, "area"),
        (Attribute.GDP, "gdp"),
        (Attribute.TOURIST_POINTS, "tourist_points"),
    ],
)
def test_value_of_reads_field(attribute, field):
    card = make(population=11, area=22.0, gdp=33.0, tourist_points=44)
    assert attribute.value_of(card) == getattr(card, field)


def test_value_of_density_uses_computed_density():
    card = make(population=900, area=30.0)
    assert Attribute.POPULATION_DENSITY.value_of(card) == card.population_density()


def test_menu_numbers():
    assert Attribute(1) is Attribute.POPULATION
    assert Attribute(5) is Attribute.POPULATION_DENSITY
    with pytest.raises(ValueError):
        Attribute(6)


def test_higher_value_wins():
    big = make(population=2000, gdp=900.0)
    small = make(population=1000, gdp=100.0)
    assert Attribute.POPULATION.beats(big, small) is True
    assert Attribute.POPULATION.beats(small, big) is False
    assert Attribute.GDP.beats(big, small) is True


def test_lower_density_wins():
    sparse = make(population=100, area=100.0)
    dense = make(population=10000, area=1.0)
    assert Attribute.POPULATION_DENSITY.beats(sparse, dense) is True
    assert Attribute.POPULATION_DENSITY.beats(dense, sparse) is False


def test_equal_values_do_not_win():
    card = make()
    for attribute in Attribute:
        assert attribute.beats(card, card) is False


def test_token_stream_splits_on_whitespace():
    lines = ["A  A01\n", "\tSantos 1000\n", "\n", "12.5 300\n"]
    assert list(token_stream(lines)) == ["A", "A01", "Santos", "1000", "12.5", "300"]


def test_read_card_builds_card_and_prompts():
    out = io.StringIO()
    tokens = iter(["B", "B02", "Recife", "1500", "218.5", "52.1", "9", "extra"])
    card = read_card(tokens, out)
    assert card == Card("B", "B02", "Recife", 1500, 218.5, 52.1, 9)
    assert next(tokens) == "extra"
    text = out.getvalue()
    assert text.startswith("Insira o Estado da sua carta")
    assert "Insira o PIB da cidade: \n" in text
    assert text.endswith("Insira a quantidade de Pontos Turisticos da cidade: \n")


def test_read_card_short_input_raises_eof():
    with pytest.raises(EOFError):
        read_card(iter(["A", "A01", "Natal"]), io.StringIO())


def test_read_card_bad_number_raises():
    with pytest.raises(ValueError):
        read_card(["A", "A01", "Natal", "many", "1", "1", "1"], io.StringIO())