import os

from file_inspector import FileInspector


def write_bytes(path, data):
    with open(path, 'wb') as f:
        f.write(data)


def test_describe_missing_file(data_file):
    info = FileInspector().describe(data_file)
    assert info == {
        'path': os.path.abspath(data_file),
        'exists': False,
        'readable': False,
        'writable': False,
        'size': 0,
        'last_modified': 'N/A'
    }


def test_describe_existing_file(data_file):
    write_bytes(data_file, b'1,Ann,a@x.com,CS,88.5\n')
    info = FileInspector().describe(data_file)
    assert info['exists'] is True
    assert info['readable'] is True
    assert info['size'] == 22
    assert info['last_modified'] != 'N/A'


def test_format_description_lines(data_file):
    inspector = FileInspector()
    text = inspector.format_description(inspector.describe(data_file))
    assert text.splitlines() == [
        f"File: {os.path.abspath(data_file)}",
        "Exists: False",
        "Readable: False",
        "Writable: False",
        "Size(bytes): 0",
        "Last Modified: N/A",
    ]


def test_read_range_missing_file(data_file):
    assert FileInspector().read_range(data_file, 0, 10) == ''


def test_read_range_inside_file(data_file):
    write_bytes(data_file, b'0123456789')
    assert FileInspector().read_range(data_file, 2, 3) == '234'


def test_read_range_offset_beyond_end(data_file):
    write_bytes(data_file, b'0123456789')
    assert FileInspector().read_range(data_file, 50, 5) == ''


def test_read_range_length_clamped_to_remaining(data_file):
    write_bytes(data_file, b'0123456789')
    assert FileInspector().read_range(data_file, 7, 100) == '789'


def test_read_range_negative_offset_starts_at_zero(data_file):
    write_bytes(data_file, b'0123456789')
    assert FileInspector().read_range(data_file, -5, 4) == '0123'


def test_read_range_negative_length_reads_nothing(data_file):
    write_bytes(data_file, b'0123456789')
    assert FileInspector().read_range(data_file, 3, -1) == ''


def test_read_range_split_multibyte_character(data_file):
    write_bytes(data_file, 'aé'.encode('utf-8'))
    assert FileInspector().read_range(data_file, 0, 2) == 'a�'


def test_read_range_on_directory_gives_empty(tmp_path):
    assert FileInspector().read_range(str(tmp_path), 0, 10) == ''
