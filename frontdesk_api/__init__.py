"""HTTP layer of the hotel front-desk backend."""
