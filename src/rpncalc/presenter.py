from .outcome import Result


class Presenter:
    '''
    Turns machine outcomes into text. Prints nothing itself.
    '''

    HELP = '''\
--- RPN CALCULATOR ---
Enter numbers and operations in Reverse Polish Notation

Operators:  +  -  *  /
Functions:  sqrt  sin  cos  tan  pow
Trigonometry in DEGREES

Commands:
  s  -> show stack
  p  -> show top
  c  -> clear stack
  h  -> help
  q  -> quit
----------------------'''

    STACK_HEADER = '====== STACK ======'
    STACK_FOOTER = '==================='

    MESSAGES = {
        Result.PARTIAL_RESULT: 'Partial result: {:g}',
        Result.CLEARED: 'Stack cleared',
        Result.TOP: 'Top: {:g}',
        Result.EMPTY_STACK: 'Empty stack',
        Result.INSUFFICIENT_OPERANDS: 'Error: insufficient operands',
        Result.DIVISION_BY_ZERO: 'Error: division by zero',
        Result.INVALID_DOMAIN: 'Error: {}',
        Result.STACK_OVERFLOW: 'Error: stack full, {:g} not pushed',
        Result.UNRECOGNIZED_TOKEN: 'Invalid input: {}',
        Result.INVALID_LITERAL: 'Invalid number: {}',
    }

    def stack(self, snapshot):
        '''
        Render snapshot, deepest first. The top is slot 1.
        '''
        lines = [self.STACK_HEADER]
        for pos, value in zip(range(len(snapshot), 0, -1), snapshot):
            lines.append('Slot {} -> {:.6f}'.format(pos, value))
        lines.append(self.STACK_FOOTER)
        return '\n'.join(lines)

    def message(self, outcome):
        '''
        Return text to show for outcome, or None if there's nothing to say.
        '''
        if outcome.tag is Result.SHOW_HELP:
            return self.HELP
        elif outcome.tag is Result.SHOW_STACK:
            return self.stack(outcome.value)
        fmt = self.MESSAGES.get(outcome.tag)
        if fmt is None:
            return None
        return fmt.format(outcome.value)
