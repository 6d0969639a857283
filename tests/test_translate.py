
from globrx.translate import translate, escape, re_escape, has_magic


def test_wildcards():
    assert translate('*.js') == r'[^/\\]*\.js'
    assert translate('*.js', True) == r'^[^/\\]*\.js$'
    assert translate('?') == r'[^/\\]'
    assert translate('a*b?c') == r'a[^/\\]*b[^/\\]c'


def test_globstar():
    assert translate('**/*.js') == r'.*[^/\\]*\.js'
    assert translate('src/**') == r'src\/.*'
    assert translate('a/**/b') == r'a\/.*b'
    assert translate('a**b') == r'a.*b'


def test_char_class():
    assert translate('[!abc].js') == r'[^abc]\.js'
    assert translate('[a-c]') == '[a-c]'
    assert translate('[*?.]') == '[*?.]'
    assert translate('[a!]') == '[a!]'
    assert translate('[^a]') == '[^a]'


def test_braces():
    assert translate('*.{js,ts}') == r'[^/\\]*\.(js|ts)'
    assert translate('{a,{b,c}}') == '(a|(b|c))'
    assert translate('{[ab],c}') == '([ab]|c)'
    assert translate('a,b') == 'a,b'
    assert translate('a}') == r'a\}'


def test_extglob():
    assert translate('file?(.min).js') == r'file(?:\.min)?\.js'
    assert translate('*(ab)') == '(?:ab)*'
    assert translate('+(a|b)') == '(?:a|b)+'
    assert translate('@(foo|bar)') == '(?:foo|bar)'
    assert translate('@(a|?(b))') == '(?:a|(?:b)?)'


def test_leftover_escaping():
    assert translate('a|b') == r'a\|b'
    assert translate('a)') == r'a\)'
    assert translate('(a)') == r'\(a\)'
    assert translate('$^+-') == r'\$\^\+\-'
    assert translate('a/b.c') == r'a\/b\.c'
    assert translate('file!.txt') == r'file!\.txt'


def test_unresolved_negation_is_literal():
    assert translate('!(a') == r'!\(a'


def test_backslash():
    assert translate(r'file\*.txt') == r'file\*\.txt'
    assert translate(r'\[a]') == r'\[a]'
    assert translate('a\\') == r'a\\'
    assert translate(r'[\]]') == r'[\]]'


def test_empty():
    assert translate('') == ''
    assert translate('', True) == ''


def test_escape():
    assert escape('a*b') == r'a\*b'
    assert escape('plain.txt') == 'plain.txt'
    assert escape('[x]?{a,b}') == r'\[x\]\?\{a,b\}'


def test_re_escape():
    assert re_escape('hello world') == 'hello world'
    assert re_escape('foo.bar') == r'foo\.bar'
    assert re_escape('price: $10.00') == r'price: \$10\.00'
    assert re_escape('(a|b)') == r'\(a\|b\)'
    assert re_escape('[test]') == r'\[test\]'
    assert re_escape('a{1,3}') == r'a\{1,3\}'
    assert re_escape('file.*') == r'file\.\*'
    assert re_escape('is this real?') == r'is this real\?'
    assert re_escape('^start') == r'\^start'
    assert re_escape('path\\to') == r'path\\to'
    assert re_escape('') == ''


def test_re_escape_matches_literal():
    import re
    special = 'hello.*+?^${}()|[]\\world'
    rx = re.compile(re_escape(special))
    assert rx.search(special)
    assert not rx.search('helloXworld')


def test_has_magic():
    assert not has_magic('foo.txt')
    assert has_magic('*.txt')
    assert has_magic('a[bc]')
    assert has_magic('!(a)')
    assert has_magic('{a,b}')


def test_backslash_is_literal():
    assert translate(r'a\qb') == 'aqb'
    assert translate(r'\d') == 'd'
    assert translate(r'\.\-') == r'\.\-'


def test_nested_negation_in_expanded_group():
    from globrx.negation import build_variant, extract_negations
    glob = '!(a|!(b))'
    variant = build_variant(glob, extract_negations(glob), 0)
    assert variant == '@(a|!(b))'
    # inner ')' closes the @() group, outer ')' is left over
    assert translate(variant, True) == r'^(?:a|!\(b)\)$'
