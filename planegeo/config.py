"""Configuration and constants for planegeo."""

# PostgreSQL geometric column syntax
# See: https://www.postgresql.org/docs/current/datatype-geometric.html
PG_POINT_TEMPLATE = "({x},{y})"
PG_SEGMENT_TEMPLATE = "[({x1},{y1}),({x2},{y2})]"
PG_BOX_TEMPLATE = "(({x1},{y1}),({x2},{y2}))"
PG_CIRCLE_TEMPLATE = "<({x},{y}),{r}>"

# Number of floats the driver delivers per column type.
WIRE_ARITY: dict[str, int] = {
    "Point": 2,
    "Vector": 2,
    "Segment": 4,
    "Box": 4,
    "Circle": 3,
}

# Float rendering: switch to exponent form outside [1e-4, 1e6)
EXPONENT_LOW = -4
EXPONENT_HIGH = 6

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
