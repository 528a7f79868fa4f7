from dotenv import load_dotenv

load_dotenv()

# Interactive extraction menu (reads pasted contracts from stdin)
from contract_extractor.app.menu import main


if __name__ == "__main__":
    raise SystemExit(main())
