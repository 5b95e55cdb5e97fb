import unittest

import attr

from sigpair_admin import documents


class CreateUserResponseTest(unittest.TestCase):
    def test_integer_user_id(self):
        resp = documents.CreateUserResponse(user_id=42)
        self.assertEqual(42, resp.user_id)

    def test_refuses_non_integers(self):
        for bad_value in ('42', 42.0, None, True):
            with self.subTest(bad_value=bad_value):
                with self.assertRaises(TypeError):
                    documents.CreateUserResponse(user_id=bad_value)


class ClaimsTest(unittest.TestCase):
    def test_create_user_claims_as_dict(self):
        claims = documents.CreateUserClaims(name='alice', iat=1000, exp=1300)
        self.assertEqual({'name': 'alice', 'iat': 1000, 'exp': 1300}, attr.asdict(claims))

    def test_user_token_claims_as_dict(self):
        claims = documents.UserTokenClaims(user_id=7, iat=1000, exp=4600, public_key='abcd')
        self.assertEqual({'user_id': 7, 'iat': 1000, 'exp': 4600, 'public_key': 'abcd'},
                         attr.asdict(claims))

    def test_claims_are_frozen(self):
        claims = documents.CreateUserClaims(name='alice', iat=1000, exp=1300)
        with self.assertRaises(attr.exceptions.FrozenInstanceError):
            claims.exp = 5000
