"""Tests for the CSV-backed record repository."""

from datetime import date
from pathlib import Path

import pytest

from pos_insights import DataPaths
from pos_insights.analytics import AnalyticsRequest, get_sales_analytics
from pos_insights.exceptions import DataQualityError, FetchError
from pos_insights.records import CsvRecordRepository, DateRange

SALES_CSV = """date,store_id,product_name,category_name,quantity,unit_price,sales_amount
2024-05-01,1,A,Drinks,2,50,100
2024-05-01,1,B,,1,50,50
2024-05-02,1,A,Drinks,1,75,75
2024-05-02,2,C,Food,1,300,300
2024-06-01,1,A,Drinks,1,80,80
"""

CLOSES_CSV = """date,store_id,groups_count,customer_count,male_count,female_count,unspecified_count,total_sales,net_sales,cash_amount,credit_amount,point_amount,electronic_money_amount
2024-05-01,1,3,4,1,2,1,150,140,100,50,0,0
2024-05-02,1,2,3,1,1,1,75,70,0,0,25,50
2024-05-02,2,1,1,0,1,0,300,280,300,0,0,0
"""

MAY = DateRange.from_dates(date(2024, 5, 1), date(2024, 5, 31))


def _write(
    paths: DataPaths, sales: str | None = SALES_CSV, closes: str | None = CLOSES_CSV
) -> None:
    paths.ensure_dirs()
    if sales is not None:
        paths.transaction_lines_csv.write_text(sales, encoding="utf-8")
    if closes is not None:
        paths.register_closes_csv.write_text(closes, encoding="utf-8")


@pytest.fixture
def paths(tmp_path: Path) -> DataPaths:
    result = DataPaths.from_root(tmp_path / "data")
    _write(result)
    return result


def test_fetch_transaction_lines_filters_range_and_store(paths: DataPaths) -> None:
    repository = CsvRecordRepository(paths)

    all_stores = repository.fetch_transaction_lines(MAY)
    store_1 = repository.fetch_transaction_lines(MAY, store_id=1)

    assert len(all_stores) == 4
    assert [line.product_name for line in store_1] == ["A", "B", "A"]
    assert store_1[0].date == date(2024, 5, 1)
    assert store_1[0].category_name == "Drinks"
    assert store_1[0].sales_amount == 100.0
    assert store_1[1].category_name is None


def test_numeric_category_and_product_names_are_read_as_text(tmp_path: Path) -> None:
    paths = DataPaths.from_root(tmp_path)
    _write(
        paths,
        sales=(
            "date,store_id,product_name,category_name,sales_amount\n"
            "2024-05-01,1,101,10,100\n"
            "2024-05-02,1,102,,50\n"
        ),
    )

    lines = CsvRecordRepository(paths).fetch_transaction_lines(MAY)

    assert [line.product_name for line in lines] == ["101", "102"]
    assert lines[0].category_name == "10"
    assert lines[1].category_name is None


def test_fetch_register_closes(paths: DataPaths) -> None:
    closes = CsvRecordRepository(paths).fetch_register_close_summaries(MAY, store_id=1)

    assert [close.customer_count for close in closes] == [4, 3]
    assert closes[1].electronic_money_amount == 50.0
    assert closes[0].groups_count == 3
    assert closes[0].net_sales == 140.0


def test_optional_register_close_columns_default_to_zero(tmp_path: Path) -> None:
    paths = DataPaths.from_root(tmp_path)
    _write(paths, closes="date,store_id,customer_count,total_sales\n2024-05-01,1,4,150\n")

    closes = CsvRecordRepository(paths).fetch_register_close_summaries(MAY)

    assert closes[0].cash_amount == 0.0
    assert closes[0].male_count == 0


def test_missing_file_raises_file_not_found(tmp_path: Path) -> None:
    paths = DataPaths.from_root(tmp_path)
    _write(paths, closes=None)

    with pytest.raises(FileNotFoundError, match="register close"):
        CsvRecordRepository(paths).fetch_register_close_summaries(MAY)


def test_missing_required_column(tmp_path: Path) -> None:
    paths = DataPaths.from_root(tmp_path)
    _write(paths, sales="date,store_id,product_name\n2024-05-01,1,A\n")

    with pytest.raises(DataQualityError, match="sales_amount"):
        CsvRecordRepository(paths).fetch_transaction_lines(MAY)


def test_negative_sales_amount_is_rejected(tmp_path: Path) -> None:
    paths = DataPaths.from_root(tmp_path)
    _write(paths, sales="date,store_id,product_name,sales_amount\n2024-05-01,1,A,-10\n")

    with pytest.raises(DataQualityError, match="negative"):
        CsvRecordRepository(paths).fetch_transaction_lines(MAY)


def test_unparseable_date_is_rejected(tmp_path: Path) -> None:
    paths = DataPaths.from_root(tmp_path)
    _write(paths, sales="date,store_id,product_name,sales_amount\nyesterday,1,A,10\n")

    with pytest.raises(DataQualityError, match="unparseable dates"):
        CsvRecordRepository(paths).fetch_transaction_lines(MAY)


def test_duplicate_register_close_is_rejected(tmp_path: Path) -> None:
    paths = DataPaths.from_root(tmp_path)
    _write(
        paths,
        closes=(
            "date,store_id,customer_count,total_sales\n"
            "2024-05-01,1,4,150\n"
            "2024-05-01,1,5,160\n"
        ),
    )

    with pytest.raises(DataQualityError, match="more than one close"):
        CsvRecordRepository(paths).fetch_register_close_summaries(MAY)


def test_report_from_csv(paths: DataPaths) -> None:
    request = AnalyticsRequest.from_query(
        {"period": "month", "storeId": "1", "currentDate": "2024-05-20"}
    )

    result = get_sales_analytics(CsvRecordRepository(paths), request).to_dict()

    assert result["totalCustomers"] == 7
    assert result["totalSales"] == 225
    assert result["registerCloseSummary"]["paymentMethods"] == {
        "cash": 100,
        "credit": 50,
        "point": 25,
        "electronicMoney": 50,
    }
    assert result["comparison"]["difference"] == 5


def test_storage_errors_surface_as_fetch_error(tmp_path: Path) -> None:
    paths = DataPaths.from_root(tmp_path)
    _write(paths, sales=None)

    with pytest.raises(FetchError) as excinfo:
        get_sales_analytics(CsvRecordRepository(paths), AnalyticsRequest())

    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
