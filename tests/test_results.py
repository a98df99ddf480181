from domain.results import SearchResponse, SearchResult, combine_summaries


def test_combined_summary_numbers_by_original_position():
    results = [
        SearchResult(url="a", summary="A"),
        SearchResult(url="b"),
        SearchResult(url="c", summary="B"),
    ]
    assert combine_summaries(results) == "1. A\n\n3. B"


def test_empty_summaries_are_skipped():
    results = [SearchResult(url="a", summary=""), SearchResult(url="b", summary=None)]
    assert combine_summaries(results) == ""
    assert combine_summaries([]) == ""


def test_single_summary_has_no_separator():
    assert combine_summaries([SearchResult(url="x"), SearchResult(url="y", summary="only")]) == "2. only"


def test_display_title_falls_back_to_url():
    assert SearchResult(url="https://a.com", title="A").display_title == "A"
    assert SearchResult(url="https://a.com").display_title == "https://a.com"
    assert SearchResult(url="https://a.com", title="").display_title == "https://a.com"


def test_response_ignores_unknown_fields():
    response = SearchResponse.model_validate(
        {"query": "q", "results": [{"url": "a.com", "score": 1.0, "raw_content": "..."}]}
    )
    assert response.results == [SearchResult(url="a.com")]


def test_numeric_text_fields_are_kept_as_strings():
    result = SearchResult.model_validate({"url": "a.com", "title": 2024, "summary": 3.5})
    assert result.title == "2024"
    assert result.summary == "3.5"
    assert combine_summaries([result]) == "1. 3.5"
