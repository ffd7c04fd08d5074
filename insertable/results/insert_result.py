from insertable.results.insert_error import InsertError
from insertable.results.insert_ok import InsertOk

type InsertResult[T] = InsertOk[T] | InsertError
