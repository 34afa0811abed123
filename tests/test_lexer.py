'''
RPN lexer tests
'''

import math

from rpncalc.lexer import Lexer

from pytest import mark


@mark.parametrize('token, number', [
    ('3.5', 3.5),
    ('0', 0.0),
    ('-2', -2.0),
    ('+7', 7.0),
    ('1.', 1.0),
    ('.25', 0.25),
    ('-.5', -0.5),
    ('1e3', 1000.0),
    ('2.5E-2', 0.025),
    ('1e+2', 100.0),
])
def test_parse(token, number):
    assert Lexer().parse(token) == number


@mark.parametrize('token', [
    '',
    '3.5x',
    '--2',
    '+-2',
    '.',
    '-',
    'e5',
    '1e',
    '1e+',
    '1.2.3',
    '3 ',
    ' 3',
    'inf',
    'nan',
    '0x10',
    '1_000',
    '\N{ARABIC-INDIC DIGIT THREE}',
])
def test_parse_rejects(token):
    assert Lexer().parse(token) is None


def test_parse_huge_is_infinite():
    assert math.isinf(Lexer().parse('1e999'))


def test_tokens():
    l = Lexer()
    assert list(l.tokens('3 4\t+  sqrt\n')) == ['3', '4', '+', 'sqrt']
    assert list(l.tokens('')) == []
    assert list(l.tokens(' \t ')) == []


@mark.parametrize('token, expected', [
    ('3.5x', True),
    ('--2', True),
    ('.x', True),
    ('foo', False),
    ('x1', False),
])
def test_isnumeric(token, expected):
    assert Lexer().isnumeric(token) is expected
