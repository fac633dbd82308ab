"""Test the stroke container and the smoother settings."""

import unittest
import numpy as np

from smoothpath import PathStroke, SmoothingSettings, PathSmoother, AnchorPoint, smooth


class TestStroke(unittest.TestCase):
    """Test the PathStroke class."""

    def setUp(self):
        # in.x, in.y, anchor.x, anchor.y, out.x, out.y
        self.flat = [
            -1, 0, 0, 0, 1, 0,
            9, 0, 10, 0, 10, 1,
            10, 9, 10, 10, 9, 10,
        ]  # fmt: skip

    def test_from_flat(self):
        stroke = PathStroke.from_flat(self.flat, closed=True)

        self.assertEqual(len(stroke), 3)
        self.assertTrue(stroke.closed)
        self.assertEqual(stroke.anchors.tolist(), [[0, 0], [10, 0], [10, 10]])
        self.assertEqual(stroke.controls_in[1].tolist(), [9, 0])
        self.assertEqual(stroke.controls_out[1].tolist(), [10, 1])
        self.assertEqual(stroke.to_flat().tolist(), self.flat)

    def test_getitem(self):
        stroke = PathStroke.from_flat(self.flat)
        anchor = stroke[1]

        self.assertIsInstance(anchor, AnchorPoint)
        self.assertEqual(anchor.anchor.x, 10)
        self.assertEqual(anchor.control_out.y, 1)
        self.assertEqual(len(list(stroke)), 3)

    def test_malformed(self):
        with self.assertRaises(ValueError):
            PathStroke.from_flat(self.flat[:-1])

        with self.assertRaises(ValueError):
            PathStroke(np.zeros((3, 2)))

    def test_from_anchors(self):
        stroke = PathStroke.from_anchors([[0, 0], [1, 2]])

        self.assertEqual(stroke.controls_in.tolist(), [[0, 0], [1, 2]])
        self.assertEqual(stroke.controls_out.tolist(), [[0, 0], [1, 2]])

    def test_copy(self):
        stroke = PathStroke.from_flat(self.flat)
        other = stroke.copy()
        other.points[0, 0] = [5, 5]

        self.assertNotEqual(stroke, other)
        self.assertEqual(stroke.controls_in[0].tolist(), [-1, 0])


class TestSettings(unittest.TestCase):
    """Test SmoothingSettings and PathSmoother."""

    def setUp(self):
        self.zigzag = PathStroke.from_anchors([[0, 0], [10, 0], [10, 10], [0, 10]])

    def test_defaults(self):
        settings = SmoothingSettings()
        self.assertFalse(settings.restrict_to_corners)
        self.assertEqual((settings.angle_min, settings.angle_max), (60, 120))

    def test_from_params(self):
        settings = SmoothingSettings.from_params(1, 30, 150)
        self.assertEqual(settings, SmoothingSettings(True, 30.0, 150.0))

        with self.assertRaises(ValueError):
            SmoothingSettings.from_params(True, -5, 90)
        with self.assertRaises(ValueError):
            SmoothingSettings.from_params(True, 0, 181)

        with self.assertWarns(UserWarning):
            SmoothingSettings.from_params(True, 90, 90)

    def test_smoother(self):
        smoother = PathSmoother(restrict_to_corners=True, angle_min=170, angle_max=180)
        self.assertEqual(str(smoother), "Smoother: corners 170 - 180")
        self.assertEqual(smoother.smooth(self.zigzag), self.zigzag)

        # Other values are kept between updates
        settings = smoother.update(restrict_to_corners=False)
        self.assertEqual(settings, SmoothingSettings(False, 170, 180))
        self.assertEqual(smoother.smooth(self.zigzag), smooth(self.zigzag))
        self.assertEqual(len(smoother.smooth_strokes([self.zigzag] * 2)), 2)

    def test_smoother_invalid(self):
        with self.assertRaises(ValueError):
            PathSmoother(angle=10)

        smoother = PathSmoother()
        with self.assertRaises(ValueError):
            smoother.update(angle_max=200)
        self.assertEqual(smoother.settings, SmoothingSettings())


if __name__ == "__main__":
    unittest.main()
