from weather_xml.main import main

main()
