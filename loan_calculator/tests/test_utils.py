from loan_calculator.core.utils import money, percent, round_money


def test_round_money_half_up():
    assert round_money(1.005) == 1.01
    assert round_money(2.675) == 2.68
    assert round_money(860.664302) == 860.66
    assert round_money(-0.004) == 0.0


def test_money_formatting():
    assert money(10327.9716) == "$10,327.97"
    assert money(-5.5, symbol="€") == "-€5.50"
    assert money(-0.001) == "$0.00"


def test_percent():
    assert percent(5.5) == "5.50 %"
    assert percent(0.5, digits=4) == "0.5000 %"
