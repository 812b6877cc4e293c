# schema.py

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

_string = {"bsonType": "string", "minLength": 1}
# stored as BSON int, so values must fit in 32 bits
_int = {"bsonType": "int", "minimum": INT32_MIN, "maximum": INT32_MAX}

customers_schema = {
    "bsonType": "object",
    "required": [
        "firstName", "lastName", "email", "mobile",
        "checkinDate", "checkoutDate", "roomNumber", "roomType",
        "checkinTime", "checkoutTime", "mode",
        "idType", "idValidationStatus", "checkinStatus", "roomAlloted",
        "omsCheckin", "omsCheckout", "idNumber", "totalGuests",
    ],
    "properties": {
        "firstName": _string,
        "lastName": _string,
        "email": _string,
        "mobile": _string,
        "checkinDate": {"bsonType": "date"},
        "checkoutDate": {"bsonType": "date"},
        "roomNumber": _string,
        "roomType": _string,
        # free-form, never parsed as a time of day
        "checkinTime": _string,
        "checkoutTime": _string,
        "mode": _string,
        "idType": _string,
        "idValidationStatus": _string,
        "checkinStatus": _string,
        "roomAlloted": _string,
        "omsCheckin": {"bsonType": "date"},
        "omsCheckout": {"bsonType": "date"},
        "idNumber": _string,
        "totalGuests": _int,
    }
}

staffs_schema = {
    "bsonType": "object",
    "required": [
        "firstName", "lastName", "email", "contact", "age", "password",
        "staffAccess", "staffProgress", "idType", "idNumber",
    ],
    "properties": {
        "firstName": _string,
        "lastName": _string,
        "email": _string,
        "contact": _string,
        "age": _int,
        "password": _string,
        "staffAccess": _string,
        "staffProgress": _string,
        "idType": _string,
        "idNumber": _string,
    }
}

SCHEMAS = {
    "customers": customers_schema,
    "staffs": staffs_schema,
}
