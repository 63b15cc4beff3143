# homefinder/sample_catalog.py
# Built-in Austin listings used when no catalog file is configured.

SAMPLE_LISTINGS = [
    {
        "id": "1",
        "address": "1234 Oak Ridge Dr",
        "city": "Austin",
        "state": "TX",
        "zip_code": "78704",
        "price": 450000,
        "property_tax": 9000,
        "hoa_fees": None,
        "bedrooms": 3,
        "bathrooms": 2,
        "square_feet": 1800,
        "year_built": 2005,
        "property_type": "house",
        "image_url": "https://images.example.com/listings/1.jpg",
        "description": "Updated single-story home on a quiet, tree-lined street in South Austin.",
        "features": ["Hardwood floors", "Updated kitchen", "Large backyard", "Two-car garage"],
        "pros": ["No HOA", "Walkable to South Congress", "Mature trees"],
        "cons": ["Older HVAC system", "Single bathroom upgrade needed"],
        "neighborhood_score": 8,
        "school_rating": 8,
        "commute_time": 15,
    },
    {
        "id": "2",
        "address": "567 Lakeview Blvd",
        "city": "Austin",
        "state": "TX",
        "zip_code": "78746",
        "price": 850000,
        "property_tax": 17000,
        "hoa_fees": 150,
        "bedrooms": 4,
        "bathrooms": 3.5,
        "square_feet": 3200,
        "year_built": 2018,
        "property_type": "house",
        "image_url": "https://images.example.com/listings/2.jpg",
        "description": "Modern family home in Westlake with lake views and top-rated schools.",
        "features": ["Lake view", "Pool", "Home office", "Smart home system", "Three-car garage"],
        "pros": ["Excellent schools", "Newer construction", "Spacious layout"],
        "cons": ["High property taxes", "Longer commute"],
        "neighborhood_score": 9,
        "school_rating": 9,
        "commute_time": 25,
    },
    {
        "id": "3",
        "address": "89 Congress Ave Unit 1204",
        "city": "Austin",
        "state": "TX",
        "zip_code": "78701",
        "price": 425000,
        "property_tax": 8500,
        "hoa_fees": 450,
        "bedrooms": 2,
        "bathrooms": 2,
        "square_feet": 1100,
        "year_built": 2015,
        "property_type": "condo",
        "image_url": "https://images.example.com/listings/3.jpg",
        "description": "High-rise downtown condo with skyline views and resort-style amenities.",
        "features": ["Skyline view", "Concierge", "Rooftop pool", "Fitness center"],
        "pros": ["Walk to work", "Low maintenance", "Amenities included"],
        "cons": ["High HOA fees", "Limited space", "No private yard"],
        "neighborhood_score": 9,
        "school_rating": 6,
        "commute_time": 5,
    },
    {
        "id": "4",
        "address": "2401 Mueller Blvd",
        "city": "Austin",
        "state": "TX",
        "zip_code": "78723",
        "price": 520000,
        "property_tax": 10400,
        "hoa_fees": 100,
        "bedrooms": 3,
        "bathrooms": 2.5,
        "square_feet": 1950,
        "year_built": 2012,
        "property_type": "townhouse",
        "image_url": "https://images.example.com/listings/4.jpg",
        "description": "Energy-efficient townhouse in the Mueller community near parks and shops.",
        "features": ["Solar panels", "Rooftop deck", "Attached garage"],
        "pros": ["Master-planned community", "Close to parks", "Energy efficient"],
        "cons": ["Shared walls", "Small yard"],
        "neighborhood_score": 8,
        "school_rating": 7,
        "commute_time": 12,
    },
    {
        "id": "5",
        "address": "7812 Cedar Hollow Ln",
        "city": "Austin",
        "state": "TX",
        "zip_code": "78750",
        "price": 600000,
        "property_tax": 12000,
        "hoa_fees": 50,
        "bedrooms": 4,
        "bathrooms": 3,
        "square_feet": 2600,
        "year_built": 2010,
        "property_type": "house",
        "image_url": "https://images.example.com/listings/5.jpg",
        "description": "Roomy Northwest Austin home backing onto a greenbelt.",
        "features": ["Greenbelt lot", "Open floor plan", "Game room", "Covered patio"],
        "pros": ["Great schools", "Lots of space", "Quiet street"],
        "cons": ["Long commute", "Dated bathrooms"],
        "neighborhood_score": 7,
        "school_rating": 9,
        "commute_time": 35,
    },
    {
        "id": "6",
        "address": "3300 Riverside Dr Apt 210",
        "city": "Austin",
        "state": "TX",
        "zip_code": "78741",
        "price": 325000,
        "property_tax": 6500,
        "hoa_fees": 275,
        "bedrooms": 1,
        "bathrooms": 1,
        "square_feet": 850,
        "year_built": 1998,
        "property_type": "apartment",
        "image_url": "https://images.example.com/listings/6.jpg",
        "description": "Starter apartment near Lady Bird Lake trails with easy downtown access.",
        "features": ["Balcony", "In-unit laundry", "Covered parking"],
        "pros": ["Affordable entry point", "Short commute", "Near the trail"],
        "cons": ["Older building", "Street noise"],
        "neighborhood_score": 6,
        "school_rating": 5,
        "commute_time": 10,
    },
]
