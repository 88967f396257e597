import pytest

from lldkit.decorator import Cappuccino, Caramel, Espresso, Ingredient, Milk, main


def test_plain_beverages():
    assert Espresso().name == "Expresso"
    assert Espresso().price == 10
    assert Cappuccino().name == "Cappuccino"
    assert Cappuccino().price == 11


def test_milk_on_espresso():
    assert Milk(Espresso()).price == 12


def test_caramel_and_milk_on_espresso():
    assert Caramel(Milk(Espresso())).price == 15


@pytest.mark.parametrize("base", [Espresso(), Cappuccino()])
def test_names_extend_the_base(base):
    assert Milk(base).name.startswith(base.name)
    assert Milk(base).name.endswith(" With Milk")
    assert Caramel(Milk(base)).name == Milk(base).name + " With Caramel"


@pytest.mark.parametrize("base", [Espresso(), Cappuccino()])
def test_order_of_ingredients_does_not_change_price(base):
    assert Caramel(Milk(base)).price == Milk(Caramel(base)).price
    assert Caramel(base).price > Milk(base).price > base.price


def test_wrapped_beverage_is_kept():
    base = Cappuccino()
    assert Milk(base).beverage is base


def test_ingredient_alone_is_abstract():
    with pytest.raises(TypeError):
        Ingredient(Espresso())


def test_main(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Beverage Name:Expresso"
    assert lines[1] == "Beverage Price:10"
    assert lines[-2] == lines[-4]