import unittest

from cursorhelp.ui.animation import SHAKE_DURATION_MS, SHAKE_KEYFRAMES, shake_frames, shake_offset


class TestShakeAnimation(unittest.TestCase):
    def test_hits_each_keyframe(self) -> None:
        for at_ms, value in SHAKE_KEYFRAMES:
            self.assertEqual(shake_offset(at_ms), value)

    def test_interpolates_between_keyframes(self) -> None:
        self.assertAlmostEqual(shake_offset(35), -7.0)
        self.assertAlmostEqual(shake_offset(105), 0.0)
        self.assertAlmostEqual(shake_offset(385), -3.5)

    def test_is_still_outside_animation(self) -> None:
        self.assertEqual(shake_offset(-10), 0.0)
        self.assertEqual(shake_offset(SHAKE_DURATION_MS + 50), 0.0)

    def test_frames_end_at_rest(self) -> None:
        frames = shake_frames(70)
        self.assertEqual(frames, [0, -14, 14, -14, 14, -7, 0])
        self.assertEqual(shake_frames()[-1], 0)

    def test_rejects_non_positive_frame_interval(self) -> None:
        with self.assertRaises(ValueError):
            shake_frames(0)


if __name__ == "__main__":
    unittest.main()
