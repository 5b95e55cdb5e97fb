import unittest
from unittest import mock

import jwt

from sigpair_admin import jwtauth
from tests.abstract_admin_test import ADMIN_TOKEN, USER_PUBKEY_HEX, decode_token

FROZEN_TIME = 1700000000.75


class CreateUserTokenTest(unittest.TestCase):
    @mock.patch('time.time', return_value=FROZEN_TIME)
    def test_claims(self, mock_time):
        token = jwtauth.new_create_user_token(ADMIN_TOKEN, 'alice')

        claims = decode_token(token, verify_times=False)
        self.assertEqual({'name': 'alice', 'iat': 1700000000, 'exp': 1700000300}, claims)

    def test_fixed_expiry(self):
        for name in ('alice', '', 'ß ünïcødé', 'x' * 1000):
            with self.subTest(name=name):
                claims = decode_token(jwtauth.new_create_user_token(ADMIN_TOKEN, name))
                self.assertEqual(name, claims['name'])
                self.assertEqual(300, claims['exp'] - claims['iat'])

    def test_hs256_header(self):
        token = jwtauth.new_create_user_token(ADMIN_TOKEN, 'alice')
        self.assertEqual('HS256', jwt.get_unverified_header(token)['alg'])

    def test_wrong_secret_does_not_verify(self):
        token = jwtauth.new_create_user_token(ADMIN_TOKEN, 'alice')
        with self.assertRaises(jwt.InvalidSignatureError):
            decode_token(token, secret=b'\x00' * 32)


class UserTokenTest(unittest.TestCase):
    @mock.patch('time.time', return_value=FROZEN_TIME)
    def test_claims(self, mock_time):
        token = jwtauth.new_user_token(ADMIN_TOKEN, 42, USER_PUBKEY_HEX, 600)

        claims = decode_token(token, verify_times=False)
        self.assertEqual({
            'user_id': 42,
            'iat': 1700000000,
            'exp': 1700000600,
            'public_key': USER_PUBKEY_HEX,
        }, claims)

    def test_lifetime(self):
        for lifetime in (1, 60, 3600, 86400 * 30):
            with self.subTest(lifetime=lifetime):
                token = jwtauth.new_user_token(ADMIN_TOKEN, 1, USER_PUBKEY_HEX, lifetime)
                claims = decode_token(token)
                self.assertEqual(lifetime, claims['exp'] - claims['iat'])

    def test_default_lifetime_constant(self):
        self.assertEqual(3600, jwtauth.USER_TOKEN_LIFETIME.total_seconds())
        self.assertEqual(300, jwtauth.CREATE_USER_TOKEN_EXPIRY.total_seconds())
