import pytest

from multitask.dithering import SetDitheringTask, dither


def _uniform(width, height, value, alpha=255):
    return [(value, value, value, alpha)] * (width * height)


def test_full_scale_is_identity():
    pixels = [(10 * i % 256, 7 * i % 256, 3 * i % 256, 200) for i in range(16)]
    assert dither(pixels, 4, 4, 255) == pixels


def test_scale_one_diffuses_error():
    result = dither(_uniform(3, 3, 100), 3, 3, 1)
    assert result[4] == (0, 0, 0, 255)
    assert result[5] == (143, 143, 143, 255)
    assert result[7] == (131, 131, 131, 255)


def test_alpha_is_preserved():
    pixels = [(i * 13 % 256, i * 29 % 256, i * 41 % 256, i) for i in range(25)]
    result = dither(pixels, 5, 5, 4)
    assert [p[3] for p in result] == [p[3] for p in pixels]


def test_input_not_mutated():
    pixels = _uniform(3, 3, 100)
    copy = list(pixels)
    dither(pixels, 3, 3, 1)
    assert pixels == copy


def test_tiny_image_unchanged():
    pixels = _uniform(2, 2, 100)
    assert dither(pixels, 2, 2, 1) == pixels


@pytest.mark.parametrize("scale", [0, -5])
def test_non_positive_scale_rejected(scale):
    with pytest.raises(ValueError):
        dither(_uniform(3, 3, 1), 3, 3, scale)


def test_size_mismatch_rejected():
    with pytest.raises(ValueError):
        dither(_uniform(3, 3, 1), 4, 3, 2)


def test_task_matches_function():
    pixels = [(i * 17 % 256, i * 5 % 256, i * 71 % 256, 255) for i in range(36)]
    task = SetDitheringTask(pixels, 6, 6, 3)
    assert task.start() is True
    assert task.wait(5) is True
    assert task.pixels == dither(pixels, 6, 6, 3)


def test_task_refuses_bad_scale():
    task = SetDitheringTask(_uniform(3, 3, 1), 3, 3, 0)
    assert task.start() is False
    assert task.is_running() is False


def test_task_refuses_invalid_pixels():
    assert SetDitheringTask([], 0, 0, 2).start() is False
    assert SetDitheringTask(_uniform(2, 2, 1), 3, 3, 2).start() is False


def test_task_completion_notifies():
    completed = []
    task = SetDitheringTask(_uniform(3, 3, 50), 3, 3, 2)
    task.complete_listeners.append(lambda: completed.append(True))
    task.start()
    task.wait(5)
    assert completed == [True]