from spaceinvaders.block import BLOCK_SIZE, Block, Rect


def test_overlapping_rects_collide_both_ways():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.collides(b) is True
    assert b.collides(a) is True


def test_touching_edges_do_not_collide():
    a = Rect(0, 0, 10, 10)
    assert a.collides(Rect(10, 0, 10, 10)) is False
    assert a.collides(Rect(0, 10, 10, 10)) is False


def test_separate_rects_do_not_collide():
    assert Rect(0, 0, 5, 5).collides(Rect(50, 50, 5, 5)) is False


def test_zero_size_rect_strictly_inside_collides():
    assert Rect(5, 5, 0, 0).collides(Rect(0, 0, 10, 10)) is True


def test_block_rect_is_square_at_position():
    block = Block(3, 7)
    assert block.rect() == Rect(3, 7, BLOCK_SIZE, BLOCK_SIZE)


def test_block_rect_collides_with_overlapping_rect():
    block = Block(20, 20)
    assert block.rect().collides(Rect(21, 21, 1, 1)) is True
    assert block.rect().collides(Rect(20 + BLOCK_SIZE, 20, 1, 1)) is False