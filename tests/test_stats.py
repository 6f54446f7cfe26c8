from victorsdk.stats import IndexStats, TimeStat


def test_time_stat_round_trip():
    stat = TimeStat(count=4, total=1.5, last=0.25, min=0.125, max=0.75)
    assert TimeStat.from_dict(stat.to_dict()) == stat


def test_time_stat_keys():
    assert set(TimeStat().to_dict()) == {"count", "total", "last", "min", "max"}


def test_time_stat_from_empty_is_zero():
    assert TimeStat.from_dict({}) == TimeStat()
    assert TimeStat.from_dict(None).count == 0


def test_index_stats_keys():
    assert set(IndexStats().to_dict()) == {"insert", "delete", "dump", "search", "search_n"}


def test_index_stats_round_trip():
    stats = IndexStats(
        insert=TimeStat(count=10, total=2.0, last=0.5, min=0.1, max=0.9),
        search_n=TimeStat(count=3, total=0.3, last=0.1, min=0.05, max=0.2),
    )
    restored = IndexStats.from_dict(stats.to_dict())
    assert restored == stats
    assert restored.search_n.count == 3


def test_index_stats_missing_sections_default_to_zero():
    stats = IndexStats.from_dict({"search": {"count": 2, "total": 0.5}})
    assert stats.search.count == 2
    assert stats.search.total == 0.5
    assert stats.delete == TimeStat()
    assert stats.dump == TimeStat()