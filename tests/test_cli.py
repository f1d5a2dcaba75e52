from hashbuckets.bucket_table import BucketTable
from hashbuckets.cli import format_report, main, read_names, write_report
from hashbuckets.hashing import compute_hash
from hashbuckets.sorting import sort_buckets

NAMES = ["Maria", "Joao", "Ana", "Pedro", "Ana", "Bia"]


def test_report_of_table_without_buckets():
    assert format_report(BucketTable(0)) == (
        "***PROJETO FINAL DE ESTRUTURA DE DADOS I***"
        "\n\nQUANTIDADE DE ELEMENTOS POR HASH:"
        "\n\n*******************************************"
        "\n\nELEMENTOS EM CADA HASH:"
    )


def test_read_names_skips_blank_lines(tmp_path):
    path = tmp_path / "names.txt"
    path.write_text("Maria\n\nJoao\nAna", encoding="utf-8")
    table = BucketTable()
    read_names(table, path)
    assert sorted(v for b in table for v in b.items) == ["Ana", "Joao", "Maria"]


def test_report_contains_counts_and_values():
    table = BucketTable()
    for name in NAMES:
        table.add(name)
    report = format_report(table)
    ana = compute_hash("Ana")
    assert f"\n\tHash {ana}: {table.bucket_size(ana)}" in report
    assert f"\n\nHASH {ana}:" in report
    assert report.count("\n\tAna") == 2
    assert report.startswith("***PROJETO FINAL DE ESTRUTURA DE DADOS I***")


def test_write_report(tmp_path):
    table = BucketTable()
    for name in NAMES:
        table.add(name)
    out = tmp_path / "report.txt"
    write_report(table, out)
    assert out.read_text(encoding="utf-8") == format_report(table)


def test_main_writes_sorted_report(tmp_path):
    source = tmp_path / "names.txt"
    source.write_text("\n".join(NAMES) + "\n", encoding="utf-8")
    out = tmp_path / "out.txt"
    assert main(["--input", str(source), "--output", str(out)]) == 0

    expected = BucketTable()
    for name in NAMES:
        expected.add(name)
    sort_buckets(expected)
    assert out.read_text(encoding="utf-8") == format_report(expected)


def test_main_missing_input(tmp_path):
    out = tmp_path / "out.txt"
    assert main(["--input", str(tmp_path / "absent.txt"), "--output", str(out)]) == 1
    assert not out.exists()