"""Unit tests for the pixel canvas."""

import pytest


class TestCanvas:
    """Tests for canvas construction and pixel access."""

    def test_create(self):
        """Test that a new canvas is black everywhere."""
        from raykernel.core.color import Color
        from raykernel.image.canvas import Canvas

        c = Canvas(10, 20)
        assert c.width == 10
        assert c.height == 20
        for y in range(c.height):
            for x in range(c.width):
                assert c.px(x, y) == Color(0, 0, 0)

    def test_write_and_read(self):
        """Test writing a pixel and reading it back."""
        from raykernel.core.color import Color
        from raykernel.image.canvas import Canvas

        c = Canvas(10, 20)
        red = Color(1, 0, 0)
        c.write_px(2, 3, red)
        assert c.px(2, 3) == red
        assert c.px(3, 2) == Color(0, 0, 0)

    def test_unclamped_storage(self):
        """Test that out-of-gamut colors are stored as written."""
        from raykernel.core.color import Color
        from raykernel.image.canvas import Canvas

        c = Canvas(2, 2)
        c.write_px(1, 1, Color(1.5, -0.5, 3.0))
        assert c.px(1, 1) == Color(1.5, -0.5, 3.0)

    def test_buffer_layout(self):
        """Test that the buffer is indexed [y, x, channel]."""
        from raykernel.core.color import Color
        from raykernel.image.canvas import Canvas

        c = Canvas(4, 3)
        c.write_px(3, 1, Color(0.1, 0.2, 0.3))
        buffer = c.to_numpy()
        assert buffer.shape == (3, 4, 3)
        assert buffer[1, 3].tolist() == [0.1, 0.2, 0.3]

    def test_to_numpy_is_copy(self):
        """Test that mutating the exported buffer leaves the canvas alone."""
        from raykernel.core.color import Color
        from raykernel.image.canvas import Canvas

        c = Canvas(2, 2)
        c.to_numpy()[0, 0] = 1.0
        assert c.px(0, 0) == Color(0, 0, 0)

    @pytest.mark.parametrize(
        "x,y",
        [(10, 0), (0, 20), (-1, 0), (0, -1), (10, 20)],
        ids=["x-past-width", "y-past-height", "negative-x", "negative-y", "both"],
    )
    def test_out_of_range(self, x, y):
        """Test that reads and writes outside the grid raise OutOfRange."""
        from raykernel.core.color import Color
        from raykernel.errors import OutOfRange
        from raykernel.image.canvas import Canvas

        c = Canvas(10, 20)
        with pytest.raises(OutOfRange, match=r"Out of range"):
            c.write_px(x, y, Color(1, 1, 1))
        with pytest.raises(IndexError):
            c.px(x, y)

    def test_empty_canvas(self):
        """Test that zero-sized canvases are allowed but have no pixels."""
        from raykernel.errors import OutOfRange
        from raykernel.image.canvas import Canvas

        c = Canvas(0, 0)
        assert c.to_numpy().shape == (0, 0, 3)
        with pytest.raises(OutOfRange):
            c.px(0, 0)

    def test_negative_size(self):
        """Test that negative dimensions are rejected."""
        from raykernel.image.canvas import Canvas

        with pytest.raises(ValueError):
            Canvas(-1, 5)
