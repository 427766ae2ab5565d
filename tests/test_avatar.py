import tempfile
import unittest
from pathlib import Path

from PIL import Image

from cursorhelp.ui.avatar import AVATAR_SIZE, circular_avatar, load_avatar, render_default_avatar


class TestAvatar(unittest.TestCase):
    def test_default_avatar_is_a_transparent_disc(self) -> None:
        image = render_default_avatar()
        self.assertEqual(image.size, (AVATAR_SIZE, AVATAR_SIZE))
        self.assertEqual(image.mode, "RGBA")
        self.assertEqual(image.getpixel((0, 0))[3], 0)
        self.assertEqual(image.getpixel((AVATAR_SIZE // 2, AVATAR_SIZE // 2))[3], 255)

    def test_default_avatar_draws_label(self) -> None:
        blank = render_default_avatar(label="")
        labelled = render_default_avatar(label="?")
        self.assertNotEqual(blank.tobytes(), labelled.tobytes())

    def test_circular_avatar_crops_to_square(self) -> None:
        source = Image.new("RGB", (120, 80), "#336699")
        avatar = circular_avatar(source, 40)
        self.assertEqual(avatar.size, (40, 40))
        self.assertEqual(avatar.getpixel((20, 20))[:3], (0x33, 0x66, 0x99))
        self.assertEqual(avatar.getpixel((0, 39))[3], 0)

    def test_load_avatar_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "me.png"
            Image.new("RGB", (64, 64), "red").save(path)
            avatar = load_avatar(path, 32)
        self.assertIsNotNone(avatar)
        self.assertEqual(avatar.size, (32, 32))

    def test_load_avatar_returns_none_for_unreadable_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "broken.png"
            path.write_text("not an image")
            self.assertIsNone(load_avatar(path))
            self.assertIsNone(load_avatar(Path(td) / "missing.png"))


if __name__ == "__main__":
    unittest.main()
