from qr_attendance.database.bootstrap import _strip_create_db_and_use, iter_sql_statements


def test_statements_split_outside_quotes():
    sql = "CREATE TABLE a (x INT);\nINSERT INTO a VALUES ('a;b');\nSELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "CREATE TABLE a (x INT)",
        "INSERT INTO a VALUES ('a;b')",
        "SELECT 1",
    ]


def test_create_database_and_use_are_stripped():
    sql = "CREATE DATABASE IF NOT EXISTS qr_attendance;\nUSE qr_attendance;\nCREATE TABLE t (id INT);\n"

    assert list(iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE t (id INT)"]
