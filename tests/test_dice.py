from machikoro.dice import Dice


def test_new_dice_are_zero():
    dice = Dice()
    assert (dice.first, dice.second, dice.bonus) == (0, 0, 0)
    assert dice.total() == 0


def test_roll_one_die_leaves_second_untouched():
    dice = Dice()
    for _ in range(200):
        dice.roll(1)
        assert 1 <= dice.first <= 6
        assert dice.second == 0
        assert dice.total() == dice.first


def test_roll_two_dice():
    dice = Dice()
    for _ in range(200):
        dice.roll(2)
        assert 1 <= dice.first <= 6
        assert 1 <= dice.second <= 6
        assert dice.total() == dice.first + dice.second


def test_add_two_raises_total_by_two():
    dice = Dice()
    dice.roll(2)
    before = dice.total()
    dice.add_two()
    assert dice.total() == before + 2


def test_add_two_is_not_cumulative():
    dice = Dice(first=3, second=4)
    dice.add_two()
    dice.add_two()
    assert dice.total() == 3 + 4 + 2


def test_clear_resets_everything():
    dice = Dice()
    dice.roll(2)
    dice.add_two()
    dice.clear()
    assert dice == Dice()