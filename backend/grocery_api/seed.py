SEED_ITEMS = [
    {
        "id": 1,
        "name": "Tomatos",
        "price": 5,
        "description": (
            "The tomato is the edible berry of the plant Solanum lycopersicum, "
            "commonly known as a tomato plant. The species originated in western "
            "South America and Central America."
        ),
    },
    {
        "id": 2,
        "name": "Cucumbers",
        "price": 3,
        "description": (
            "Cucumber is a widely-cultivated creeping vine plant in the family "
            "Cucurbitaceae that bears cylindrical to spherical fruits."
        ),
    },
    {
        "id": 3,
        "name": "Bread",
        "price": 10,
        "description": (
            "Bread is a staple food prepared from a dough of flour and water, "
            "usually by baking."
        ),
    },
    {
        "id": 4,
        "name": "Grapes",
        "price": 4,
        "description": (
            "A grape is a fruit, botanically a berry, of the deciduous woody vines "
            "of the flowering plant genus Vitis."
        ),
    },
]

# First id handed out by ItemStore.create; kept clear of the seed ids.
FIRST_NEW_ID = 6
