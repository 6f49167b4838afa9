import re
from typing import List, NamedTuple, Optional

_tagged_pattern = re.compile(r'\s*(?P<tag>[A-Za-z_][A-Za-z0-9_]*)\[(?P<inner>.*)\]\s*', re.DOTALL)


class TaggedLiteral(NamedTuple):
    """
    A textual element of the form tag[param_1,...,param_n], with its parameters already split
    """
    tag: str
    parameters: List[str]

    def __str__(self):
        return f'{self.tag}[' + ','.join(self.parameters) + ']'


def split_parameters(inner: str) -> List[str]:
    """
    split a comma separated parameter list, ignoring commas nested inside brackets

    >>> split_parameters('1,2')
    ['1', '2']
    >>> split_parameters('fraction[1,2],3')
    ['fraction[1,2]', '3']
    >>> split_parameters('')
    []

    :raises ValueError: if the brackets are unbalanced
    """
    if not inner.strip():
        return []
    ret = []
    depth = 0
    start = 0
    for i, c in enumerate(inner):
        if c == '[':
            depth += 1
        elif c == ']':
            depth -= 1
            if depth < 0:
                raise ValueError(f'unbalanced brackets in {inner!r}')
        elif c == ',' and depth == 0:
            ret.append(inner[start:i].strip())
            start = i + 1
    if depth:
        raise ValueError(f'unbalanced brackets in {inner!r}')
    ret.append(inner[start:].strip())
    return ret


def split_tagged(text: str) -> Optional[TaggedLiteral]:
    """
    :return: the tag and split parameters of a literal such as polynomial[1,2], or None if text is not tagged

    >>> split_tagged('polynomial[1,fraction[1,2]]')
    TaggedLiteral(tag='polynomial', parameters=['1', 'fraction[1,2]'])
    >>> split_tagged('12') is None
    True
    """
    m = _tagged_pattern.fullmatch(text)
    if not m:
        return None
    try:
        parameters = split_parameters(m.group('inner'))
    except ValueError:
        return None
    return TaggedLiteral(m.group('tag'), parameters)
