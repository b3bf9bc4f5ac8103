"""Fixed records served when the TMDB catalog is unreachable or unconfigured."""

FALLBACK_MOVIES = (
    {
        "id": 1,
        "title": "The Shawshank Redemption",
        "poster_path": "/q6y0Go1tsGEsmtFryDOJo3dEmqu.jpg",
        "backdrop_path": "/kXfqcdQKsToO0OUXHcrrNCHDBzO.jpg",
        "overview": (
            "Framed in the 1940s for the double murder of his wife and her lover, "
            "upstanding banker Andy Dufresne begins a new life at the Shawshank prison."
        ),
        "vote_average": 8.7,
        "release_date": "1994-09-23",
    },
    {
        "id": 2,
        "title": "The Godfather",
        "poster_path": "/3bhkrj58Vtu7enYsRolD1fZdja1.jpg",
        "backdrop_path": "/tmU7GeKVybMWFButWEGl2M4GeiP.jpg",
        "overview": (
            "Spanning the years 1945 to 1955, a chronicle of the fictional "
            "Italian-American Corleone crime family."
        ),
        "vote_average": 8.7,
        "release_date": "1972-03-14",
    },
    {
        "id": 3,
        "title": "The Dark Knight",
        "poster_path": "/qJ2tW6WMUDux911r6m7haRef0WH.jpg",
        "backdrop_path": "/hkBaDkMWbLaf8B1lsWsKX7Ew3Xq.jpg",
        "overview": (
            "Batman raises the stakes in his war on crime with the help of "
            "Lt. Jim Gordon and District Attorney Harvey Dent."
        ),
        "vote_average": 8.5,
        "release_date": "2008-07-16",
    },
    {
        "id": 4,
        "title": "Pulp Fiction",
        "poster_path": "/d5iIlFn5s0ImszYzBPb8JPIfbXD.jpg",
        "backdrop_path": "/4cDFJr4HnXN5AdPw4AKrmLlMWdO.jpg",
        "overview": (
            "A burger-loving hit man, his philosophical partner, "
            "and a drug-addled gangster's moll."
        ),
        "vote_average": 8.5,
        "release_date": "1994-09-10",
    },
    {
        "id": 5,
        "title": "Forrest Gump",
        "poster_path": "/arw2vcBveWOVZr6pxd9XTd1TdQa.jpg",
        "backdrop_path": "/7c9UVPPiTPltouxRVY6N9uUaHNd.jpg",
        "overview": (
            "A man with a low IQ has accomplished great things in his life "
            "and been present during significant historic events."
        ),
        "vote_average": 8.4,
        "release_date": "1994-06-23",
    },
    {
        "id": 6,
        "title": "Inception",
        "poster_path": "/9gk7adHYeDvHkCSEqAvQNLV5Uge.jpg",
        "backdrop_path": "/s3TBrRGB1iav7gFOCNx3H31MoES.jpg",
        "overview": (
            "Cobb, a skilled thief who commits corporate espionage by "
            "infiltrating the subconscious of his targets."
        ),
        "vote_average": 8.4,
        "release_date": "2010-07-15",
    },
)
