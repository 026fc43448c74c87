"""
Mock TMDB API responses for testing.

Contains realistic responses from the TMDB API for the discover, search and
movie details endpoints. These fixtures are used with respx to mock httpx calls.
"""

# GET /discover/movie?with_original_language=hi&page=1
TMDB_DISCOVER_PAGE_1 = {
    "page": 1,
    "total_pages": 2,
    "results": [
        {
            "id": 864692,
            "title": "Pathaan",
            "original_title": "पठान",
            "original_language": "hi",
            "overview": "An Indian spy takes on the leader of a group of mercenaries...",
            "poster_path": "/arf00BkwvXo0CFKbaD9OpqdE4Yb.jpg",
            "backdrop_path": "/bLJTjfbZ1c5zSNiAvGYs1Uc82ir.jpg",
            "release_date": "2023-01-25",
            "vote_average": 6.1,
            "vote_count": 400,
            "popularity": 30.5,
        },
        {
            "id": 872906,
            "title": "Jawan",
            "original_title": "जवान",
            "original_language": "hi",
            "overview": "A high-octane action thriller...",
            "poster_path": "/jFt1gS4BGHlK8xt76Y81Alp4dbt.jpg",
            "backdrop_path": None,
            "release_date": "2023-09-07",
            "vote_average": 7.0,
            "vote_count": 500,
            "popularity": 45.1,
        },
    ],
}

# GET /discover/movie?with_original_language=hi&page=2
TMDB_DISCOVER_PAGE_2 = {
    "page": 2,
    "total_pages": 2,
    "results": [
        {
            "id": 781732,
            "title": "Animal",
            "original_title": "एनिमल",
            "original_language": "hi",
            "overview": "A son's love for his father...",
            "poster_path": "/hr9rjR3J0xBBKmlJ4n3gHId9ccx.jpg",
            "release_date": "2023-12-01",
            "vote_average": 6.4,
            "vote_count": 150,
            "popularity": 25.0,
        },
    ],
}

TMDB_DISCOVER_EMPTY = {"page": 1, "total_pages": 1, "results": []}

# GET /search/movie?query=Dangal&language=en-US
TMDB_SEARCH_RESPONSE = {
    "page": 1,
    "total_pages": 1,
    "results": [
        {
            "id": 360814,
            "title": "Dangal",
            "original_title": "दंगल",
            "original_language": "hi",
            "poster_path": "/cJRPOLEexI7qp2DKtFfCh7YaaUG.jpg",
            "release_date": "2016-12-21",
            "vote_average": 8.0,
            "vote_count": 1300,
        },
    ],
}

# GET /movie/360814
TMDB_MOVIE_DETAILS_RESPONSE = {
    "id": 360814,
    "title": "Dangal",
    "original_title": "दंगल",
    "original_language": "hi",
    "overview": "Former wrestler Mahavir Singh Phogat and his two wrestler daughters...",
    "poster_path": "/cJRPOLEexI7qp2DKtFfCh7YaaUG.jpg",
    "backdrop_path": "/j3nnVIk2xUZCF7C9sDPcLRHhx4g.jpg",
    "release_date": "2016-12-21",
    "vote_average": 8.0,
    "vote_count": 1300,
    "revenue": 311000000,
    "budget": 10000000,
    "popularity": 20.2,
}

TMDB_NOT_FOUND_RESPONSE = {
    "success": False,
    "status_code": 34,
    "status_message": "The resource you requested could not be found.",
}
