# langstore

A small record keeper for programming languages and the programmers who use
them. Records are kept in CSV files, XML files or an SQLite database. You can
browse and edit them from an interactive console menu or through a Python API.

## Install

    pip install .

## Console use

    langstore [--format {csv,sqlite,xml}] [path]

- `--format` picks the kind of storage. The default is `sqlite`.
- `path` is the storage directory. For `sqlite` it may also be a database
  file. If `path` is not given, the program uses `data/sqlite/`, `data/xml/`
  or `data/csv/`, depending on the format.

For SQLite, a path that is an existing directory means the file `data.sqlite`
inside it. Missing tables are created when the database is opened.

The main menu offers two sections: the language storage and the programmer
storage. In each section you can:

- print every record,
- open one record by id, then view, update or delete it,
- create a new record.

The menus read whitespace-separated words, so a field value cannot contain
spaces. The storage is saved when you leave the main menu or when input runs
out. If the storage cannot be read or written, the command prints an error
and exits with status 1.

## Library use

Every storage offers the same methods:

- `load`, `save`
- `get_all_languages`, `get_language_by_id`, `update_language`,
  `remove_language`, `insert_language`
- `get_all_programmers`, `get_programmer_by_id`, `update_programmer`,
  `remove_programmer`, `insert_programmer`

How they behave:

- `get_*_by_id` returns `None` when no record has that id.
- `remove_*` returns whether a record was removed.
- `insert_*` stores the record under a new id and returns that id.

```python
from langstore.models import Language
from langstore.storage import MemoryStorage

storage = MemoryStorage()
new_id = storage.insert_language(Language(name="Python", type="dynamic", author="someone"))
print(storage.get_language_by_id(new_id))
```

The records are the dataclasses in `langstore.models`:

- `Language`: `id`, `name`, `type`, `author`, `user_id`
- `Programmer`: `id`, `name`, `stage`, `date_of_start`
- `User`: `id`, `username`, `password_hash`

### Back ends

- `langstore.storage.MemoryStorage` keeps records in memory only. `load` and
  `save` do nothing. A new id is one more than the largest id held. Records
  are returned as copies.
- `langstore.csv_storage.CsvStorage(directory)` keeps its records in
  `lang.csv` and `prog.csv`. `load` appends the records of both files, and
  both files must exist. `save` rewrites both files. Fields are not quoted,
  so values must not contain commas or newlines.
- `langstore.xml_storage.XmlStorage(directory)` keeps its records in
  `lang.xml` (root `langs`) and `prog.xml` (root `progs`). A file that is
  missing or cannot be parsed is logged and skipped on `load`.
- `langstore.xml_storage.XmlFileStorage(path)` keeps languages in a single
  XML file. Programmers are held in memory only.
- `langstore.sqlite_storage.SqliteStorage(path)` keeps records in an SQLite
  database.
  - `load` opens the connection and `save`/`close` close it. The storage can
    also be used as a context manager.
  - It also links programmers to languages (`get_programmers_for_language`,
    `insert_programmer_to_language`, `remove_programmer_from_language`).
  - `get_user_languages` lists the languages whose `user_id` matches.
  - Removing a language also removes its links.
  - `update_language` changes name, type and author, but not `user_id`.

The XML element helpers `language_to_element`, `element_to_language`,
`programmer_to_element` and `element_to_programmer` are in
`langstore.xml_storage`. The plain CSV helpers `langstore.csv_table.parse_table`
and `langstore.csv_table.format_table` turn text into rows of strings and back.

## What it does not do

- There is no graphical interface. The console menu is the only front end.
- There are no user accounts or login. `User` is a plain record that no
  storage saves.
- Language ownership is only the `user_id` field together with
  `get_user_languages`.
- The console menu does not manage links between languages and programmers.
  Use the `SqliteStorage` methods for that.

## Tests

    pip install .[test]
    pytest