import unittest

from cursorhelp.services import (
    INVALID_CREDENTIALS_MESSAGE,
    AuthenticationError,
    AuthenticationRejected,
    MockAuthenticator,
)


class TestMockAuthenticator(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.auth = MockAuthenticator(delay=0, progress_steps=5)

    async def test_accepts_non_blank_username_and_six_char_password(self) -> None:
        self.assertTrue(await self.auth.login("alice", "abcdef"))

    async def test_rejects_blank_or_whitespace_username(self) -> None:
        self.assertFalse(await self.auth.login("", "abcdef"))
        self.assertFalse(await self.auth.login("   \t", "abcdef"))

    async def test_rejects_short_password(self) -> None:
        self.assertFalse(await self.auth.login("alice", "abc"))
        self.assertFalse(await self.auth.login("alice", "abcde"))

    async def test_reports_progress_up_to_completion(self) -> None:
        fractions: list[float] = []
        await self.auth.login("alice", "abcdef", fractions.append)
        self.assertEqual(fractions, [0.2, 0.4, 0.6, 0.8, 1.0])

    async def test_authenticate_raises_rejected_on_refusal(self) -> None:
        with self.assertRaises(AuthenticationRejected) as ctx:
            await self.auth.authenticate("alice", "abc")
        self.assertIsInstance(ctx.exception, AuthenticationError)
        self.assertEqual(str(ctx.exception), INVALID_CREDENTIALS_MESSAGE)

    async def test_authenticate_returns_none_on_success(self) -> None:
        self.assertIsNone(await self.auth.authenticate("alice", "abcdef"))

    async def test_password_length_counts_code_points(self) -> None:
        self.assertFalse(await self.auth.login("alice", "\U0001F600" * 3))
        self.assertTrue(await self.auth.login("alice", "\U0001F600" * 6))

    async def test_custom_password_length(self) -> None:
        auth = MockAuthenticator(delay=0, min_password_length=8)
        self.assertFalse(await auth.login("alice", "abcdefg"))
        self.assertTrue(await auth.login("alice", "abcdefgh"))


class TestMockAuthenticatorValidation(unittest.TestCase):
    def test_default_delay_is_one_and_a_half_seconds(self) -> None:
        self.assertEqual(MockAuthenticator().delay, 1.5)

    def test_rejects_invalid_parameters(self) -> None:
        with self.assertRaises(ValueError):
            MockAuthenticator(delay=-1)
        with self.assertRaises(ValueError):
            MockAuthenticator(min_password_length=0)
        with self.assertRaises(ValueError):
            MockAuthenticator(progress_steps=0)


if __name__ == "__main__":
    unittest.main()
