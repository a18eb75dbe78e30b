from voidly_mcp.stdio import main

main()
