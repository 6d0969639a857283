
from globrx.negation import NegationSpan, extract_negations, build_variant


def test_extract_single():
    assert extract_negations('!(test).js') == [NegationSpan(0, 6, 'test')]
    assert extract_negations('src/!(a|b)/x') == [NegationSpan(4, 9, 'a|b')]


def test_extract_multiple():
    spans = extract_negations('!(a)/!(b)')
    assert spans == [NegationSpan(0, 3, 'a'), NegationSpan(5, 8, 'b')]
    assert spans[0].inner == 'a'
    assert spans[1].start == 5


def test_extract_nested():
    assert extract_negations('!(a|!(b))c') == [NegationSpan(0, 8, 'a|!(b)')]
    assert extract_negations('!(a(b)c)') == [NegationSpan(0, 7, 'a(b)c')]
    assert extract_negations('!(@(x|y))') == [NegationSpan(0, 8, '@(x|y)')]


def test_extract_unclosed():
    assert extract_negations('!(abc') == []
    assert extract_negations('!(a!(b)') == [NegationSpan(3, 6, 'b')]


def test_extract_none():
    assert extract_negations('') == []
    assert extract_negations('plain*.txt') == []
    assert extract_negations('file!.txt') == []
    assert extract_negations('!') == []


def test_build_variant():
    glob = '!(a)/!(b)'
    spans = extract_negations(glob)
    assert build_variant(glob, spans) == '*/*'
    assert build_variant(glob, spans, -1) == '*/*'
    assert build_variant(glob, spans, 0) == '@(a)/*'
    assert build_variant(glob, spans, 1) == '*/@(b)'


def test_build_variant_context():
    glob = 'src/!(test|spec)/*.js'
    spans = extract_negations(glob)
    assert build_variant(glob, spans) == 'src/*/*.js'
    assert build_variant(glob, spans, 0) == 'src/@(test|spec)/*.js'


def test_build_variant_no_spans():
    assert build_variant('a*b', []) == 'a*b'
    assert build_variant('a*b', [], 0) == 'a*b'
