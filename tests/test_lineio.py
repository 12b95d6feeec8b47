from pyconftree.lineio import LineFile, decode_bytes, split_lines


def test_read_lines(tmp_path):
    path = tmp_path / 'a.txt'
    path.write_bytes(b'one\r\ntwo\n\nthree')
    with LineFile(str(path)) as fp:
        assert fp.ready()
        lines = []
        while not fp.end_of_stream():
            lines.append(fp.read_line())
    assert lines == ['one', 'two', '', 'three']


def test_iterate_lines(tmp_path):
    path = tmp_path / 'a.txt'
    path.write_text('x\ny\n', encoding='utf-8')
    with LineFile(str(path)) as fp:
        assert list(fp) == ['x', 'y']
        assert fp.read_line() == ''


def test_missing_file_is_not_ready(tmp_path):
    fp = LineFile(str(tmp_path / 'missing.txt'))
    assert not fp.ready()
    assert fp.end_of_stream()
    fp.close()


def test_write_lines(tmp_path):
    path = tmp_path / 'out.txt'
    with LineFile(str(path), True) as fp:
        assert fp.ready()
        fp.write_line('first')
        fp.write_line()
        fp.write_line('last')
    assert path.read_text(encoding='utf-8') == 'first\n\nlast\n'


def test_decode_with_given_encoding():
    raw = '名称 = 红色警戒'.encode('gbk')
    assert decode_bytes(raw, 'gbk') == '名称 = 红色警戒'


def test_decode_guesses_and_drops_bom():
    text = 'Name = Grüße, ça va très bien\n' * 5
    assert decode_bytes(text.encode('utf-8')) == text
    assert decode_bytes(b'\xef\xbb\xbfkey = 1', 'utf-8') == 'key = 1'
    assert decode_bytes(b'\xef\xbb\xbfkey = 1') == 'key = 1'


def test_split_only_on_line_breaks():
    text = 'k = a\x0cb\r\nv = c\x0bd\rz = \u2028x\x85y\n'
    assert split_lines(text) == ['k = a\x0cb', 'v = c\x0bd', 'z = \u2028x\x85y']
    assert split_lines('a\n\n') == ['a', '']
    assert split_lines('') == []


def test_read_keeps_form_feed_inside_line(tmp_path):
    path = tmp_path / 'a.txt'
    path.write_bytes('k = a\x0cb\nz = \u2028x\n'.encode('utf-8'))
    with LineFile(str(path), encoding='utf-8') as fp:
        assert list(fp) == ['k = a\x0cb', 'z = \u2028x']
