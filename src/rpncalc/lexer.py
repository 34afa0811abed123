from functools import reduce
import operator

import regex


class Lexer:
    '''
    Splits lines into tokens and recognizes numeric literals.

    For consistency with Machine, needs to be instantiated, despite holding
    no internal state.
    '''
    # Digits, ASCII only; \d would also take other scripts' digits.
    DIGITS = r'[0-9]+'
    # Numeric literal. Must match the whole token, so no anchors in here.
    # String formatting and regex is a tricky business, because of the braces.
    # It works here. Be careful in general!
    NUMBER = r'''
              [+-]?
              (?:
                  (?:
                      # 1, 12, 1. (notice trailing dot), 1.3
                      {DIGITS}
                      (?:
                          \.
                          (?:{DIGITS})?
                      )?
                  )|(?:
                      # .2
                      \.
                      {DIGITS}
                  )
              )
              '''.format(DIGITS=DIGITS)
    # 1e3, 1E-3, 1e+3, never bare e
    EXPONENT = r'''
                [eE]
                [+-]?
                {DIGITS}
                '''.format(DIGITS=DIGITS)
    LITERAL = r'(?:' + NUMBER + r')(?:' + EXPONENT + r')?'
    # What a number, well formed or not, starts with.
    NUMERIC = r'[+\-.0-9]'
    TOKEN = r'\S+'
    # Default regex flags for matching
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def tokens(self, line):
        '''
        Yield the whitespace-delimited tokens of line.
        '''
        for match in regex.finditer(type(self).TOKEN, line):
            yield match.group(0)

    def parse(self, token):
        '''
        Return the number token spells out, or None.

        All of it: 3.5x or 3.5 followed by anything else is not 3.5.
        '''
        if regex.fullmatch(type(self).LITERAL, token,
                           flags=type(self).FLAGS) is None:
            return None
        return float(token)

    def isnumeric(self, token):
        '''
        Return True if token looks like an attempt at a number.
        '''
        return regex.match(type(self).NUMERIC, token) is not None
