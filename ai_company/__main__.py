from ai_company.adapters.discord.launcher import main

main()
