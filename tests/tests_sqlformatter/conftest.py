"""
Shared fixtures for formatter tests.

Key fixtures:
- dml_formatter: DmlFormatter with a 4-space indent unit.
- ddl_formatter: DdlFormatter with a 4-space indent unit.
- sample_dml: Representative DML statements used by the property tests.
"""

import pytest

from sqlformatter.ddl import DdlFormatter
from sqlformatter.dml import DmlFormatter

SAMPLE_DML = [
    "select a, b from t where a = 1",
    "select count(*) from t",
    "select case when a = 1 then 'x' else 'y' end from t",
    "update t set a = 1, b = 2 where id = 3",
    "insert into t (a, b) values (1, 2)",
    "delete from t where id = 1",
    "select a.id, b.name from a inner join b on a.id = b.id where a.x = 1",
    "select a from t where a in (select b from u)",
    "select a, count(*) from t group by a order by a desc",
    "select a from t where b between 1 and 10 and c = 2",
    "select a from t where (a = 1 or b = 2) and c = 3",
    "select * from (select a from t) x",
    "select a from t left outer join u on t.id = u.id, v where t.x = v.x",
    "select coalesce(max(a), 0), b from t",
    "select a from t; select b from u",
    "select a from t join u on t.id = u.id and u.k in (1, 2) where x = 1",
    "select a from t join u on t.id in (select id from v) where x = 1",
    "select a from t where a in (select b from u join v on u.id = v.id) and c = 1",
    "select a from t join u on t.id = coalesce(u.id, 0), v where t.x = v.x",
    "SELECT\tA ,B\nFROM   T\r\nWHERE A   >= 1",
]


@pytest.fixture
def dml_formatter():
    return DmlFormatter(indent_unit="    ")


@pytest.fixture
def ddl_formatter():
    return DdlFormatter(indent_unit="    ")


@pytest.fixture(params=SAMPLE_DML)
def sample_dml(request):
    return request.param
